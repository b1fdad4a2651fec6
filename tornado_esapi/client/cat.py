from tornado_esapi.client.utils import NamespacedClient, make_path, \
    query_params


class CatClient(NamespacedClient):
    """The compact and aligned text (CAT) APIs, meant for humans at a
    terminal. Pass ``format='json'`` for machine readable output.

    """
    @query_params('format', 'h', 'help', 'local', 'master_timeout', 's', 'v')
    def aliases(self, name=None, params=None, headers=None):
        """
        Shows information about currently configured aliases to indices
        including filter and routing infos.
        `<https://www.elastic.co/guide/en/elasticsearch/reference/7.x/cat-alias.html>`_

        :arg name: A list of alias names to return
        :arg format: a short version of the Accept header, e.g. json, yaml
        :arg h: List of column names to display
        :arg help: Return help information
        :arg local: Return local information, do not retrieve the state from
            master node (default: false)
        :arg master_timeout: Explicit operation timeout for connection to
            master node
        :arg s: List of column names or column aliases to sort by
        :arg v: Verbose mode. Display column headers
        """
        return self.perform_request('GET', make_path('_cat', 'aliases', name),
                                    params=params, headers=headers)

    @query_params('bytes', 'format', 'h', 'help', 'local', 'master_timeout',
                  's', 'v')
    def allocation(self, node_id=None, params=None, headers=None):
        """
        Provides a snapshot of how many shards are allocated to each data
        node and how much disk space they are using.
        `<https://www.elastic.co/guide/en/elasticsearch/reference/7.x/cat-allocation.html>`_

        :arg node_id: A list of node IDs or names to limit the returned
            information
        :arg bytes: The unit in which to display byte values
        """
        return self.perform_request('GET',
                                    make_path('_cat', 'allocation', node_id),
                                    params=params, headers=headers)

    @query_params('format', 'h', 'help', 'local', 'master_timeout', 's', 'v')
    def count(self, index=None, params=None, headers=None):
        """
        Provides quick access to the document count of the entire cluster,
        or individual indices.
        `<https://www.elastic.co/guide/en/elasticsearch/reference/7.x/cat-count.html>`_

        :arg index: A list of index names to limit the returned information
        """
        return self.perform_request('GET', make_path('_cat', 'count', index),
                                    params=params, headers=headers)

    @query_params('bytes', 'format', 'h', 'help', 'local', 'master_timeout',
                  's', 'v')
    def fielddata(self, fields=None, params=None, headers=None):
        """
        Shows how much heap memory is currently being used by fielddata on
        every data node in the cluster.
        `<https://www.elastic.co/guide/en/elasticsearch/reference/7.x/cat-fielddata.html>`_

        :arg fields: A list of fields to return the fielddata size
        :arg bytes: The unit in which to display byte values
        """
        return self.perform_request('GET',
                                    make_path('_cat', 'fielddata', fields),
                                    params=params, headers=headers)

    @query_params('format', 'h', 'help', 'local', 'master_timeout', 's', 'ts',
                  'v')
    def health(self, params=None, headers=None):
        """
        Returns a concise representation of the cluster health.
        `<https://www.elastic.co/guide/en/elasticsearch/reference/7.x/cat-health.html>`_

        :arg ts: Set to false to disable timestamping (default: True)
        """
        return self.perform_request('GET', '/_cat/health', params=params,
                                    headers=headers)

    @query_params('help', 's')
    def help(self, params=None, headers=None):
        """
        Returns help for the Cat APIs.
        `<https://www.elastic.co/guide/en/elasticsearch/reference/7.x/cat.html>`_
        """
        return self.perform_request('GET', '/_cat', params=params,
                                    headers=headers)

    @query_params('bytes', 'format', 'h', 'health', 'help',
                  'include_unloaded_segments', 'local', 'master_timeout',
                  'pri', 's', 'v')
    def indices(self, index=None, params=None, headers=None):
        """
        Returns information about indices: number of primaries and replicas,
        document counts, disk size, ...
        `<https://www.elastic.co/guide/en/elasticsearch/reference/7.x/cat-indices.html>`_

        :arg index: A list of index names to limit the returned information
        :arg bytes: The unit in which to display byte values
        :arg health: A health status ("green", "yellow", or "red" to filter
            only indices matching the specified health status
        :arg include_unloaded_segments: If set to true segment stats will
            include stats for segments that are not currently loaded into
            memory
        :arg pri: Set to true to return stats only for primary shards
        """
        return self.perform_request('GET', make_path('_cat', 'indices', index),
                                    params=params, headers=headers)

    @query_params('format', 'h', 'help', 'local', 'master_timeout', 's', 'v')
    def master(self, params=None, headers=None):
        """
        Returns information about the master node.
        `<https://www.elastic.co/guide/en/elasticsearch/reference/7.x/cat-master.html>`_
        """
        return self.perform_request('GET', '/_cat/master', params=params,
                                    headers=headers)

    @query_params('format', 'h', 'help', 'local', 'master_timeout', 's', 'v')
    def nodeattrs(self, params=None, headers=None):
        """
        Returns information about custom node attributes.
        `<https://www.elastic.co/guide/en/elasticsearch/reference/7.x/cat-nodeattrs.html>`_
        """
        return self.perform_request('GET', '/_cat/nodeattrs', params=params,
                                    headers=headers)

    @query_params('format', 'full_id', 'h', 'help', 'local', 'master_timeout',
                  's', 'v')
    def nodes(self, params=None, headers=None):
        """
        Returns basic statistics about performance of cluster nodes.
        `<https://www.elastic.co/guide/en/elasticsearch/reference/7.x/cat-nodes.html>`_

        :arg full_id: Return the full node ID instead of the shortened version
            (default: false)
        """
        return self.perform_request('GET', '/_cat/nodes', params=params,
                                    headers=headers)

    @query_params('format', 'h', 'help', 'local', 'master_timeout', 's', 'v')
    def pending_tasks(self, params=None, headers=None):
        """
        Returns a concise representation of the cluster pending tasks.
        `<https://www.elastic.co/guide/en/elasticsearch/reference/7.x/cat-pending-tasks.html>`_
        """
        return self.perform_request('GET', '/_cat/pending_tasks',
                                    params=params, headers=headers)

    @query_params('format', 'h', 'help', 'local', 'master_timeout', 's', 'v')
    def plugins(self, params=None, headers=None):
        """
        Returns information about installed plugins across nodes.
        `<https://www.elastic.co/guide/en/elasticsearch/reference/7.x/cat-plugins.html>`_
        """
        return self.perform_request('GET', '/_cat/plugins', params=params,
                                    headers=headers)

    @query_params('bytes', 'format', 'h', 'help', 'master_timeout', 's', 'v')
    def recovery(self, index=None, params=None, headers=None):
        """
        Returns information about index shard recoveries, both on-going
        completed.
        `<https://www.elastic.co/guide/en/elasticsearch/reference/7.x/cat-recovery.html>`_

        :arg index: A list of index names to limit the returned information
        :arg bytes: The unit in which to display byte values
        """
        return self.perform_request('GET',
                                    make_path('_cat', 'recovery', index),
                                    params=params, headers=headers)

    @query_params('format', 'h', 'help', 'local', 'master_timeout', 's', 'v')
    def repositories(self, params=None, headers=None):
        """
        Returns information about snapshot repositories registered in the
        cluster.
        `<https://www.elastic.co/guide/en/elasticsearch/reference/7.x/cat-repositories.html>`_
        """
        return self.perform_request('GET', '/_cat/repositories',
                                    params=params, headers=headers)

    @query_params('bytes', 'format', 'h', 'help', 's', 'v')
    def segments(self, index=None, params=None, headers=None):
        """
        Provides low-level information about the segments in the shards of
        an index.
        `<https://www.elastic.co/guide/en/elasticsearch/reference/7.x/cat-segments.html>`_

        :arg index: A list of index names to limit the returned information
        :arg bytes: The unit in which to display byte values
        """
        return self.perform_request('GET',
                                    make_path('_cat', 'segments', index),
                                    params=params, headers=headers)

    @query_params('bytes', 'format', 'h', 'help', 'local', 'master_timeout',
                  's', 'v')
    def shards(self, index=None, params=None, headers=None):
        """
        Provides a detailed view of shard allocation on nodes.
        `<https://www.elastic.co/guide/en/elasticsearch/reference/7.x/cat-shards.html>`_

        :arg index: A list of index names to limit the returned information
        :arg bytes: The unit in which to display byte values
        """
        return self.perform_request('GET', make_path('_cat', 'shards', index),
                                    params=params, headers=headers)

    @query_params('format', 'h', 'help', 'ignore_unavailable',
                  'master_timeout', 's', 'v')
    def snapshots(self, repository=None, params=None, headers=None):
        """
        Returns all snapshots in a specific repository.
        `<https://www.elastic.co/guide/en/elasticsearch/reference/7.x/cat-snapshots.html>`_

        :arg repository: Name of repository from which to fetch the snapshot
            information
        :arg ignore_unavailable: Set to true to ignore unavailable snapshots
        """
        return self.perform_request('GET',
                                    make_path('_cat', 'snapshots',
                                              repository),
                                    params=params, headers=headers)

    @query_params('actions', 'detailed', 'format', 'h', 'help', 'nodes',
                  'parent_task', 's', 'v')
    def tasks(self, params=None, headers=None):
        """
        Returns information about the tasks currently executing on one or
        more nodes in the cluster.
        `<https://www.elastic.co/guide/en/elasticsearch/reference/7.x/tasks.html>`_

        :arg actions: A list of actions that should be returned. Leave empty
            to return all.
        :arg detailed: Return detailed task information (default: false)
        :arg nodes: A list of node IDs or names to limit the returned
            information
        :arg parent_task: Return tasks with specified parent task id. Set to
            -1 to return all.
        """
        return self.perform_request('GET', '/_cat/tasks', params=params,
                                    headers=headers)

    @query_params('format', 'h', 'help', 'local', 'master_timeout', 's', 'v')
    def templates(self, name=None, params=None, headers=None):
        """
        Returns information about existing templates.
        `<https://www.elastic.co/guide/en/elasticsearch/reference/7.x/cat-templates.html>`_

        :arg name: A pattern that returned template names must match
        """
        return self.perform_request('GET',
                                    make_path('_cat', 'templates', name),
                                    params=params, headers=headers)

    @query_params('format', 'h', 'help', 'local', 'master_timeout', 's',
                  'size', 'v')
    def thread_pool(self, thread_pool_patterns=None, params=None,
                    headers=None):
        """
        Returns cluster-wide thread pool statistics per node. By default the
        active, queue and rejected statistics are returned for all thread
        pools.
        `<https://www.elastic.co/guide/en/elasticsearch/reference/7.x/cat-thread-pool.html>`_

        :arg thread_pool_patterns: A list of regular-expressions to filter
            the thread pools in the output
        :arg size: The multiplier in which to display values
        """
        return self.perform_request('GET',
                                    make_path('_cat', 'thread_pool',
                                              thread_pool_patterns),
                                    params=params, headers=headers)
