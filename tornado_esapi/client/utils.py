"""Helpers shared by the endpoint methods: value escaping, path building,
query parameter handling and construction of the outbound request.

"""
from datetime import date, datetime, timedelta
from functools import wraps
import logging
from urllib.parse import quote

from tornado import httpclient
from tornado import httputil

LOGGER = logging.getLogger(__name__)

# parts of URL to be omitted
SKIP_IN_PATH = (None, '', b'', [], ())

# accepted by every endpoint
GLOBAL_PARAMS = ('pretty', 'human', 'error_trace', 'filter_path')

# only sent when switched on
FLAG_PARAMS = ('pretty', 'human', 'error_trace')

CONTENT_TYPE_JSON = 'application/json'


def escape(value):
    """Escape a single value of a URL string or a query parameter. If it is
    a list or tuple, turn it into a comma-separated string first.

    """
    if isinstance(value, (list, tuple)):
        return ','.join(escape(item) for item in value)
    elif isinstance(value, bool):
        return 'true' if value else 'false'
    elif isinstance(value, timedelta):
        return format_duration(value)
    elif isinstance(value, (date, datetime)):
        return value.isoformat()
    elif isinstance(value, bytes):
        return value.decode('utf-8')
    elif isinstance(value, str):
        return value
    return str(value)


def format_duration(value):
    """Render a :class:`~datetime.timedelta` as an Elasticsearch time unit.

    Anything below a millisecond is sent as nanoseconds.

    :param datetime.timedelta value: The duration
    :rtype: str

    """
    micros = (value.days * 86400 + value.seconds) * 1000000 + \
        value.microseconds
    if micros < 1000:
        return '%dnanos' % (micros * 1000)
    return '%dms' % (micros // 1000)


def make_path(*parts):
    """Create a URL string from parts, omit all `None` values and empty
    strings. Convert lists and tuples to comma separated values.

    """
    return '/' + '/'.join(quote(escape(part), ',*')
                          for part in parts if part not in SKIP_IN_PATH)


def require_params(**values):
    """Raise :exc:`ValueError` for the first required value that is empty.

    """
    for name, value in values.items():
        if value in SKIP_IN_PATH:
            raise ValueError('Empty value passed for a required argument '
                             '%r.' % name)


def query_params(*es_query_params):
    """Decorator that pops all accepted parameters from method's kwargs and
    puts them in the params argument.

    Parameters left at ``None`` never reach the query string. A trailing
    underscore is stripped from the wire name so ``from_`` is sent as
    ``from``. Values of a raw ``params`` dict get the same treatment.

    """
    def _wrapper(func):
        @wraps(func)
        def _wrapped(*args, **kwargs):
            params = {}
            for name, value in (kwargs.pop('params', None) or {}).items():
                if value is None:
                    continue
                if name == 'request_timeout':
                    params[name] = value
                else:
                    params[name.rstrip('_')] = escape(value)
            headers = kwargs.pop('headers', None)
            request_timeout = kwargs.pop('request_timeout', None)
            for name in es_query_params + GLOBAL_PARAMS:
                if name not in kwargs:
                    continue
                value = kwargs.pop(name)
                if value is None:
                    continue
                if name in FLAG_PARAMS:
                    if value:
                        params[name] = 'true'
                    continue
                params[name.rstrip('_')] = escape(value)
            if request_timeout is not None:
                params['request_timeout'] = request_timeout
            return func(*args, params=params, headers=headers, **kwargs)
        return _wrapped
    return _wrapper


def build_request(method, path, params=None, body=None, headers=None):
    """Build the outbound request for an endpoint call. The URL is relative,
    the transport owns the scheme, host and prefix.

    :param str method: The HTTP method
    :param str path: The absolute path (without host) to target
    :param dict params: Escaped query parameters
    :param bytes body: The serialized request body
    :param dict headers: Caller supplied headers
    :rtype: tornado.httpclient.HTTPRequest

    """
    params = dict(params or {})
    request_timeout = params.pop('request_timeout', None)
    if isinstance(request_timeout, timedelta):
        request_timeout = request_timeout.total_seconds()

    url = path
    if params:
        url = httputil.url_concat(path, sorted(params.items()))

    request_headers = httputil.HTTPHeaders()
    if body is not None:
        request_headers['Content-Type'] = CONTENT_TYPE_JSON
    if headers:
        items = headers.get_all() if isinstance(headers, httputil.HTTPHeaders) \
            else headers.items()
        for name, value in items:
            request_headers.add(name, value)

    LOGGER.debug('Built [%s] %s', method, url)
    return httpclient.HTTPRequest(url, method=method,
                                  headers=request_headers, body=body,
                                  request_timeout=request_timeout,
                                  allow_nonstandard_methods=True)


class NamespacedClient(object):
    """Base for the groups of endpoints reached through an attribute of
    :class:`~tornado_esapi.AsyncElasticsearch`.

    """
    def __init__(self, client):
        self.client = client

    @property
    def transport(self):
        return self.client.transport

    def perform_request(self, method, path, params=None, headers=None,
                        body=None):
        return self.client.perform_request(method, path, params=params,
                                           headers=headers, body=body)
