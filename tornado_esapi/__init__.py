"""tornado_esapi provides asynchronous bindings for the Elasticsearch REST API
on top of the Tornado stack.

Every endpoint builds its path and query string, hands the request to a
transport and resolves to a :class:`~tornado_esapi.Response`::

    from tornado import gen
    from tornado import web
    from tornado_esapi import AsyncElasticsearch


    class Info(web.RequestHandler):

        @gen.coroutine
        def get(self, *args, **kwargs):
            es = AsyncElasticsearch('http://localhost:9200')
            response = yield es.info()
            self.set_status(response.status_code)
            self.finish(response.body)

"""
__version__ = '1.0.0'

from tornado_esapi.client import AsyncElasticsearch
from tornado_esapi.response import Response
from tornado_esapi.transport import AsyncHttpTransport, Transport

__all__ = ['AsyncElasticsearch', 'AsyncHttpTransport', 'Response',
           'Transport']
