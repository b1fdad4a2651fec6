from tornado_esapi.client.utils import NamespacedClient, make_path, \
    query_params, require_params


class IngestClient(NamespacedClient):

    @query_params('master_timeout', 'timeout')
    def delete_pipeline(self, id, params=None, headers=None):
        """
        Deletes a pipeline.
        `<https://www.elastic.co/guide/en/elasticsearch/reference/7.x/delete-pipeline-api.html>`_

        :arg id: Pipeline ID
        :arg master_timeout: Explicit operation timeout for connection to
            master node
        :arg timeout: Explicit operation timeout
        """
        require_params(id=id)
        return self.perform_request('DELETE',
                                    make_path('_ingest', 'pipeline', id),
                                    params=params, headers=headers)

    @query_params('master_timeout')
    def get_pipeline(self, id=None, params=None, headers=None):
        """
        Returns a pipeline.
        `<https://www.elastic.co/guide/en/elasticsearch/reference/7.x/get-pipeline-api.html>`_

        :arg id: Comma separated list of pipeline ids. Wildcards supported
        """
        return self.perform_request('GET',
                                    make_path('_ingest', 'pipeline', id),
                                    params=params, headers=headers)

    @query_params()
    def processor_grok(self, params=None, headers=None):
        """
        Returns a list of the built-in patterns.
        `<https://www.elastic.co/guide/en/elasticsearch/reference/7.x/grok-processor.html#grok-processor-rest-get>`_
        """
        return self.perform_request('GET', '/_ingest/processor/grok',
                                    params=params, headers=headers)

    @query_params('master_timeout', 'timeout')
    def put_pipeline(self, id, body, params=None, headers=None):
        """
        Creates or updates a pipeline.
        `<https://www.elastic.co/guide/en/elasticsearch/reference/7.x/put-pipeline-api.html>`_

        :arg id: Pipeline ID
        :arg body: The ingest definition
        """
        require_params(id=id, body=body)
        return self.perform_request('PUT',
                                    make_path('_ingest', 'pipeline', id),
                                    params=params, headers=headers,
                                    body=body)

    @query_params('verbose')
    def simulate(self, body, id=None, params=None, headers=None):
        """
        Allows to simulate a pipeline with example documents.
        `<https://www.elastic.co/guide/en/elasticsearch/reference/7.x/simulate-pipeline-api.html>`_

        :arg body: The simulate definition
        :arg id: Pipeline ID
        :arg verbose: Verbose mode. Display data output for each processor in
            executed pipeline
        """
        require_params(body=body)
        return self.perform_request('GET',
                                    make_path('_ingest', 'pipeline', id,
                                              '_simulate'),
                                    params=params, headers=headers,
                                    body=body)
