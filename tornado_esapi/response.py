"""The uniform result returned by every endpoint"""
from tornado import httputil


class Response(object):
    """The status code, headers and raw body of an Elasticsearch response.

    Error statuses are returned as-is, inspect :meth:`is_error` to find out
    whether the request succeeded.

    :param int status_code: The HTTP status code
    :param tornado.httputil.HTTPHeaders headers: The response headers
    :param bytes body: The raw response body

    """
    def __init__(self, status_code, headers=None, body=None):
        self.status_code = status_code
        if not isinstance(headers, httputil.HTTPHeaders):
            headers = httputil.HTTPHeaders(headers or {})
        self.headers = headers
        self.body = body or b''

    @classmethod
    def from_http_response(cls, response):
        """Wrap the response object returned by a transport.

        :param tornado.httpclient.HTTPResponse response: The raw response
        :rtype: Response

        """
        return cls(response.code, response.headers, response.body)

    def is_error(self):
        return self.status_code > 299

    def warnings(self):
        """Return the values of the ``Warning`` headers, Elasticsearch uses
        them to flag deprecated usage.

        :rtype: list

        """
        return self.headers.get_list('Warning')

    def has_warnings(self):
        return bool(self.warnings())

    def __str__(self):
        output = '[%d %s]' % (self.status_code,
                              httputil.responses.get(self.status_code,
                                                     'Unknown'))
        if self.body:
            output = '%s %s' % (output, self.body.decode('utf-8', 'replace'))
        return output

    def __repr__(self):
        return '<Response %d (%d bytes)>' % (self.status_code, len(self.body))
