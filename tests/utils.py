import io
import json
from urllib.parse import parse_qsl, urlsplit

from tornado import gen
from tornado import httpclient
from tornado import httputil
from tornado import testing

from tornado_esapi import AsyncElasticsearch, Transport


class RecordingTransport(Transport):
    """Keeps every request it is handed and answers with a canned response"""

    def __init__(self, code=200, body=b'{}', headers=None):
        self.code = code
        self.body = body
        self.headers = headers or {'Content-Type': 'application/json'}
        self.requests = []
        self.closed = False

    @gen.coroutine
    def perform(self, request):
        self.requests.append(request)
        return httpclient.HTTPResponse(
            request, self.code, headers=httputil.HTTPHeaders(self.headers),
            buffer=io.BytesIO(self.body))

    def close(self):
        self.closed = True


class FailingTransport(Transport):

    def __init__(self, error):
        self.error = error

    @gen.coroutine
    def perform(self, request):
        raise self.error


class ClientTestCase(testing.AsyncTestCase):

    def setUp(self):
        super(ClientTestCase, self).setUp()
        self.transport = RecordingTransport()
        self.client = AsyncElasticsearch(transport=self.transport)

    @property
    def request(self):
        return self.transport.requests[-1]

    @property
    def path(self):
        return urlsplit(self.request.url).path

    @property
    def query(self):
        return dict(parse_qsl(urlsplit(self.request.url).query,
                              keep_blank_values=True))

    @property
    def json_body(self):
        return json.loads(self.request.body.decode('utf-8'))

    def assert_request(self, method, path, query=None):
        self.assertEqual(self.request.method, method)
        self.assertEqual(self.path, path)
        self.assertDictEqual(self.query, query or {})
