from tornado_esapi.client.utils import NamespacedClient, make_path, \
    query_params


class NodesClient(NamespacedClient):

    @query_params('ignore_idle_threads', 'interval', 'snapshots', 'threads',
                  'timeout', 'type')
    def hot_threads(self, node_id=None, params=None, headers=None):
        """
        Returns information about hot threads on each node in the cluster.
        `<https://www.elastic.co/guide/en/elasticsearch/reference/7.x/cluster-nodes-hot-threads.html>`_

        :arg node_id: A list of node IDs or names to limit the returned
            information; use `_local` to return information from the node
            you're connecting to, leave empty to get information from all nodes
        :arg ignore_idle_threads: Don't show threads that are in known-idle
            places, such as waiting on a socket select or pulling from an empty
            task queue (default: true)
        :arg interval: The interval for the second sampling of threads
        :arg snapshots: Number of samples of thread stacktrace (default: 10)
        :arg threads: Specify the number of threads to provide information for
            (default: 3)
        :arg timeout: Explicit operation timeout
        :arg type: The type to sample (default: cpu)
        """
        return self.perform_request('GET',
                                    make_path('_nodes', node_id,
                                              'hot_threads'),
                                    params=params, headers=headers)

    @query_params('flat_settings', 'timeout')
    def info(self, node_id=None, metric=None, params=None, headers=None):
        """
        Returns information about nodes in the cluster.
        `<https://www.elastic.co/guide/en/elasticsearch/reference/7.x/cluster-nodes-info.html>`_

        :arg node_id: A list of node IDs or names to limit the returned
            information; use `_local` to return information from the node
            you're connecting to, leave empty to get information from all nodes
        :arg metric: A list of metrics you wish returned. Leave empty to
            return all.
        :arg flat_settings: Return settings in flat format (default: false)
        :arg timeout: Explicit operation timeout
        """
        return self.perform_request('GET', make_path('_nodes', node_id, metric),
                                    params=params, headers=headers)

    @query_params('timeout')
    def reload_secure_settings(self, node_id=None, params=None,
                               headers=None):
        """
        Reloads secure settings.
        `<https://www.elastic.co/guide/en/elasticsearch/reference/7.x/secure-settings.html#reloadable-secure-settings>`_

        :arg node_id: A list of node IDs to span the reload/reinit call.
            Should stay empty because reloading usually involves all cluster
            nodes.
        :arg timeout: Explicit operation timeout
        """
        return self.perform_request('POST',
                                    make_path('_nodes', node_id,
                                              'reload_secure_settings'),
                                    params=params, headers=headers)

    @query_params('completion_fields', 'fielddata_fields', 'fields', 'groups',
                  'include_segment_file_sizes', 'level', 'timeout', 'types')
    def stats(self, node_id=None, metric=None, index_metric=None, params=None,
              headers=None):
        """
        Returns statistical information about nodes in the cluster.
        `<https://www.elastic.co/guide/en/elasticsearch/reference/7.x/cluster-nodes-stats.html>`_

        :arg node_id: A list of node IDs or names to limit the returned
            information; use `_local` to return information from the node
            you're connecting to, leave empty to get information from all nodes
        :arg metric: Limit the information returned to the specified metrics
        :arg index_metric: Limit the information returned for `indices` metric
            to the specific index metrics. Isn't used if `indices` (or `all`)
            metric isn't specified.
        :arg completion_fields: A list of fields for `fielddata` and `suggest`
            index metric (supports wildcards)
        :arg fielddata_fields: A list of fields for `fielddata` index metric
            (supports wildcards)
        :arg fields: A list of fields for `fielddata` and `completion` index
            metric (supports wildcards)
        :arg groups: A list of search groups for `search` index metric
        :arg include_segment_file_sizes: Whether to report the aggregated disk
            usage of each one of the Lucene index files (only applies if
            segment stats are requested)
        :arg level: Return indices stats aggregated at index, node or shard
            level
        :arg timeout: Explicit operation timeout
        :arg types: A list of document types for the `indexing` index metric
        """
        return self.perform_request('GET',
                                    make_path('_nodes', node_id, 'stats',
                                              metric, index_metric),
                                    params=params, headers=headers)

    @query_params('timeout')
    def usage(self, node_id=None, metric=None, params=None, headers=None):
        """
        Returns low-level information about REST actions usage on nodes.
        `<https://www.elastic.co/guide/en/elasticsearch/reference/7.x/cluster-nodes-usage.html>`_

        :arg node_id: A list of node IDs or names to limit the returned
            information
        :arg metric: Limit the information returned to the specified metrics
        """
        return self.perform_request('GET',
                                    make_path('_nodes', node_id, 'usage',
                                              metric),
                                    params=params, headers=headers)
