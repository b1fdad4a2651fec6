from tornado_esapi.client.utils import NamespacedClient, make_path, \
    query_params, require_params


class IndicesClient(NamespacedClient):
    """Index management: creation, mappings, settings, aliases, templates
    and maintenance operations.

    """
    @query_params()
    def analyze(self, body=None, index=None, params=None, headers=None):
        """
        Performs the analysis process on a text and return the tokens
        breakdown of the text.
        `<https://www.elastic.co/guide/en/elasticsearch/reference/7.x/indices-analyze.html>`_

        :arg body: Define analyzer/tokenizer parameters and the text on which
            the analysis should be performed
        :arg index: The name of the index to scope the operation
        """
        return self.perform_request('GET', make_path(index, '_analyze'),
                                    params=params, headers=headers,
                                    body=body)

    @query_params('allow_no_indices', 'expand_wildcards', 'fielddata',
                  'fields', 'ignore_unavailable', 'query', 'request')
    def clear_cache(self, index=None, params=None, headers=None):
        """
        Clears all or specific caches for one or more indices.
        `<https://www.elastic.co/guide/en/elasticsearch/reference/7.x/indices-clearcache.html>`_

        :arg index: A list of index name to limit the operation
        :arg fielddata: Clear field data
        :arg fields: A list of fields to clear when using the `fielddata`
            parameter (default: all)
        :arg query: Clear query caches
        :arg request: Clear request cache
        """
        return self.perform_request('POST',
                                    make_path(index, '_cache', 'clear'),
                                    params=params, headers=headers)

    @query_params('allow_no_indices', 'expand_wildcards',
                  'ignore_unavailable', 'master_timeout', 'timeout',
                  'wait_for_active_shards')
    def close(self, index, params=None, headers=None):
        """
        Closes an index.
        `<https://www.elastic.co/guide/en/elasticsearch/reference/7.x/indices-open-close.html>`_

        :arg index: A comma separated list of indices to close
        :arg allow_no_indices: Whether to ignore if a wildcard indices
            expression resolves into no concrete indices.
        :arg expand_wildcards: Whether to expand wildcard expression to
            concrete indices that are open, closed or both.
        :arg ignore_unavailable: Whether specified concrete indices should be
            ignored when unavailable (missing or closed)
        :arg master_timeout: Specify timeout for connection to master
        :arg timeout: Explicit operation timeout
        :arg wait_for_active_shards: Sets the number of active shards to wait
            for before the operation returns.
        """
        require_params(index=index)
        return self.perform_request('POST', make_path(index, '_close'),
                                    params=params, headers=headers)

    @query_params('include_type_name', 'master_timeout', 'timeout',
                  'wait_for_active_shards')
    def create(self, index, body=None, params=None, headers=None):
        """
        Creates an index with optional settings and mappings.
        `<https://www.elastic.co/guide/en/elasticsearch/reference/7.x/indices-create-index.html>`_

        :arg index: The name of the index
        :arg body: The configuration for the index (`settings` and
            `mappings`)
        :arg include_type_name: Whether a type should be expected in the body
            of the mappings.
        :arg master_timeout: Specify timeout for connection to master
        :arg timeout: Explicit operation timeout
        :arg wait_for_active_shards: Set the number of active shards to wait
            for before the operation returns.
        """
        require_params(index=index)
        return self.perform_request('PUT', make_path(index), params=params,
                                    headers=headers, body=body)

    @query_params('allow_no_indices', 'expand_wildcards',
                  'ignore_unavailable', 'master_timeout', 'timeout')
    def delete(self, index, params=None, headers=None):
        """
        Deletes an index.
        `<https://www.elastic.co/guide/en/elasticsearch/reference/7.x/indices-delete-index.html>`_

        :arg index: A list of indices to delete; use `_all` or `*` string to
            delete all indices
        :arg master_timeout: Specify timeout for connection to master
        :arg timeout: Explicit operation timeout
        """
        require_params(index=index)
        return self.perform_request('DELETE', make_path(index),
                                    params=params, headers=headers)

    @query_params('master_timeout', 'timeout')
    def delete_alias(self, index, name, params=None, headers=None):
        """
        Deletes an alias.
        `<https://www.elastic.co/guide/en/elasticsearch/reference/7.x/indices-aliases.html>`_

        :arg index: A list of index names (supports wildcards); use `_all`
            for all indices
        :arg name: A list of aliases to delete (supports wildcards); use
            `_all` to delete all aliases for the specified indices.
        """
        require_params(index=index, name=name)
        return self.perform_request('DELETE',
                                    make_path(index, '_alias', name),
                                    params=params, headers=headers)

    @query_params('master_timeout', 'timeout')
    def delete_template(self, name, params=None, headers=None):
        """
        Deletes an index template.
        `<https://www.elastic.co/guide/en/elasticsearch/reference/7.x/indices-templates.html>`_

        :arg name: The name of the template
        """
        require_params(name=name)
        return self.perform_request('DELETE', make_path('_template', name),
                                    params=params, headers=headers)

    @query_params('allow_no_indices', 'expand_wildcards', 'flat_settings',
                  'ignore_unavailable', 'include_defaults', 'local')
    def exists(self, index, params=None, headers=None):
        """
        Returns information about whether a particular index exists, a 200
        status when it does and 404 when it does not.
        `<https://www.elastic.co/guide/en/elasticsearch/reference/7.x/indices-exists.html>`_

        :arg index: A list of index names
        :arg flat_settings: Return settings in flat format (default: false)
        :arg include_defaults: Whether to return all default setting for each
            of the indices.
        :arg local: Return local information, do not retrieve the state from
            master node (default: false)
        """
        require_params(index=index)
        return self.perform_request('HEAD', make_path(index), params=params,
                                    headers=headers)

    @query_params('allow_no_indices', 'expand_wildcards',
                  'ignore_unavailable', 'local')
    def exists_alias(self, name, index=None, params=None, headers=None):
        """
        Returns information about whether a particular alias exists.
        `<https://www.elastic.co/guide/en/elasticsearch/reference/7.x/indices-aliases.html>`_

        :arg name: A list of alias names to return
        :arg index: A list of index names to filter aliases
        """
        require_params(name=name)
        return self.perform_request('HEAD', make_path(index, '_alias', name),
                                    params=params, headers=headers)

    @query_params('flat_settings', 'local', 'master_timeout')
    def exists_template(self, name, params=None, headers=None):
        """
        Returns information about whether a particular index template
        exists.
        `<https://www.elastic.co/guide/en/elasticsearch/reference/7.x/indices-templates.html>`_

        :arg name: The comma separated names of the index templates
        """
        require_params(name=name)
        return self.perform_request('HEAD', make_path('_template', name),
                                    params=params, headers=headers)

    @query_params('allow_no_indices', 'expand_wildcards',
                  'ignore_unavailable', 'local')
    def exists_type(self, index, doc_type, params=None, headers=None):
        """
        Returns information about whether a particular document type exists.
        `<https://www.elastic.co/guide/en/elasticsearch/reference/7.x/indices-types-exists.html>`_

        :arg index: A list of index names; use `_all` to check the types
            across all indices
        :arg doc_type: A list of document types to check
        """
        require_params(index=index, doc_type=doc_type)
        return self.perform_request('HEAD',
                                    make_path(index, '_mapping', doc_type),
                                    params=params, headers=headers)

    @query_params('allow_no_indices', 'expand_wildcards', 'force',
                  'ignore_unavailable', 'wait_if_ongoing')
    def flush(self, index=None, params=None, headers=None):
        """
        Performs the flush operation on one or more indices.
        `<https://www.elastic.co/guide/en/elasticsearch/reference/7.x/indices-flush.html>`_

        :arg index: A list of index names; use `_all` or empty string for all
            indices
        :arg force: Whether a flush should be forced even if it is not
            necessarily needed ie. if no changes will be committed to the
            index.
        :arg wait_if_ongoing: If set to true the flush operation will block
            until the flush can be executed if another flush operation is
            already executing.
        """
        return self.perform_request('POST', make_path(index, '_flush'),
                                    params=params, headers=headers)

    @query_params('allow_no_indices', 'expand_wildcards',
                  'ignore_unavailable')
    def flush_synced(self, index=None, params=None, headers=None):
        """
        Performs a synced flush operation on one or more indices.
        `<https://www.elastic.co/guide/en/elasticsearch/reference/7.x/indices-synced-flush.html>`_

        :arg index: A list of index names; use `_all` or empty string for all
            indices
        """
        return self.perform_request('POST',
                                    make_path(index, '_flush', 'synced'),
                                    params=params, headers=headers)

    @query_params('allow_no_indices', 'expand_wildcards', 'flush',
                  'ignore_unavailable', 'max_num_segments',
                  'only_expunge_deletes')
    def forcemerge(self, index=None, params=None, headers=None):
        """
        Performs the force merge operation on one or more indices.
        `<https://www.elastic.co/guide/en/elasticsearch/reference/7.x/indices-forcemerge.html>`_

        :arg index: A list of index names; use `_all` or empty string to
            perform the operation on all indices
        :arg flush: Specify whether the index should be flushed after
            performing the operation (default: true)
        :arg max_num_segments: The number of segments the index should be
            merged into (default: dynamic)
        :arg only_expunge_deletes: Specify whether the operation should only
            expunge deleted documents
        """
        return self.perform_request('POST', make_path(index, '_forcemerge'),
                                    params=params, headers=headers)

    @query_params('allow_no_indices', 'expand_wildcards',
                  'ignore_unavailable', 'master_timeout', 'timeout',
                  'wait_for_active_shards')
    def freeze(self, index, params=None, headers=None):
        """
        Freezes an index. A frozen index has almost no overhead on the
        cluster (except for maintaining its metadata in memory) and is
        read-only.
        `<https://www.elastic.co/guide/en/elasticsearch/reference/7.x/freeze-index-api.html>`_

        :arg index: The name of the index to freeze
        """
        require_params(index=index)
        return self.perform_request('POST', make_path(index, '_freeze'),
                                    params=params, headers=headers)

    @query_params('allow_no_indices', 'expand_wildcards', 'flat_settings',
                  'ignore_unavailable', 'include_defaults',
                  'include_type_name', 'local', 'master_timeout')
    def get(self, index, params=None, headers=None):
        """
        Returns information about one or more indices.
        `<https://www.elastic.co/guide/en/elasticsearch/reference/7.x/indices-get-index.html>`_

        :arg index: A list of index names
        :arg flat_settings: Return settings in flat format (default: false)
        :arg include_defaults: Whether to return all default setting for each
            of the indices.
        :arg include_type_name: Whether to add the type name to the response
            (default: false)
        :arg local: Return local information, do not retrieve the state from
            master node (default: false)
        :arg master_timeout: Specify timeout for connection to master
        """
        require_params(index=index)
        return self.perform_request('GET', make_path(index), params=params,
                                    headers=headers)

    @query_params('allow_no_indices', 'expand_wildcards',
                  'ignore_unavailable', 'local')
    def get_alias(self, index=None, name=None, params=None, headers=None):
        """
        Returns an alias.
        `<https://www.elastic.co/guide/en/elasticsearch/reference/7.x/indices-aliases.html>`_

        :arg index: A list of index names to filter aliases
        :arg name: A list of alias names to return
        """
        return self.perform_request('GET', make_path(index, '_alias', name),
                                    params=params, headers=headers)

    @query_params('allow_no_indices', 'expand_wildcards',
                  'ignore_unavailable', 'include_defaults',
                  'include_type_name', 'local')
    def get_field_mapping(self, fields, index=None, doc_type=None,
                          params=None, headers=None):
        """
        Returns mapping for one or more fields.
        `<https://www.elastic.co/guide/en/elasticsearch/reference/7.x/indices-get-field-mapping.html>`_

        :arg fields: A list of fields
        :arg index: A list of index names
        :arg doc_type: A list of document types
        :arg include_defaults: Whether the default mapping values should be
            returned as well
        """
        require_params(fields=fields)
        return self.perform_request('GET',
                                    make_path(index, '_mapping', doc_type,
                                              'field', fields),
                                    params=params, headers=headers)

    @query_params('allow_no_indices', 'expand_wildcards',
                  'ignore_unavailable', 'include_type_name', 'local',
                  'master_timeout')
    def get_mapping(self, index=None, doc_type=None, params=None,
                    headers=None):
        """
        Returns mappings for one or more indices.
        `<https://www.elastic.co/guide/en/elasticsearch/reference/7.x/indices-get-mapping.html>`_

        :arg index: A list of index names
        :arg doc_type: A list of document types
        """
        return self.perform_request('GET',
                                    make_path(index, '_mapping', doc_type),
                                    params=params, headers=headers)

    @query_params('allow_no_indices', 'expand_wildcards', 'flat_settings',
                  'ignore_unavailable', 'include_defaults', 'local',
                  'master_timeout')
    def get_settings(self, index=None, name=None, params=None, headers=None):
        """
        Returns settings for one or more indices.
        `<https://www.elastic.co/guide/en/elasticsearch/reference/7.x/indices-get-settings.html>`_

        :arg index: A list of index names; use `_all` or empty string to
            perform the operation on all indices
        :arg name: The name of the settings that should be included
        :arg flat_settings: Return settings in flat format (default: false)
        :arg include_defaults: Whether to return all default setting for each
            of the indices.
        """
        return self.perform_request('GET',
                                    make_path(index, '_settings', name),
                                    params=params, headers=headers)

    @query_params('flat_settings', 'include_type_name', 'local',
                  'master_timeout')
    def get_template(self, name=None, params=None, headers=None):
        """
        Returns an index template.
        `<https://www.elastic.co/guide/en/elasticsearch/reference/7.x/indices-templates.html>`_

        :arg name: The comma separated names of the index templates
        """
        return self.perform_request('GET', make_path('_template', name),
                                    params=params, headers=headers)

    @query_params('allow_no_indices', 'expand_wildcards',
                  'ignore_unavailable')
    def get_upgrade(self, index=None, params=None, headers=None):
        """
        The _upgrade API is no longer useful and will be removed.
        `<https://www.elastic.co/guide/en/elasticsearch/reference/7.x/indices-upgrade.html>`_

        :arg index: A list of index names; use `_all` or empty string to
            perform the operation on all indices
        """
        return self.perform_request('GET', make_path(index, '_upgrade'),
                                    params=params, headers=headers)

    @query_params('allow_no_indices', 'expand_wildcards',
                  'ignore_unavailable', 'master_timeout', 'timeout',
                  'wait_for_active_shards')
    def open(self, index, params=None, headers=None):
        """
        Opens an index.
        `<https://www.elastic.co/guide/en/elasticsearch/reference/7.x/indices-open-close.html>`_

        :arg index: A comma separated list of indices to open
        """
        require_params(index=index)
        return self.perform_request('POST', make_path(index, '_open'),
                                    params=params, headers=headers)

    @query_params('master_timeout', 'timeout')
    def put_alias(self, index, name, body=None, params=None, headers=None):
        """
        Creates or updates an alias.
        `<https://www.elastic.co/guide/en/elasticsearch/reference/7.x/indices-aliases.html>`_

        :arg index: A list of index names the alias should point to
            (supports wildcards); use `_all` to perform the operation on all
            indices.
        :arg name: The name of the alias to be created or updated
        :arg body: The settings for the alias, such as `routing` or `filter`
        """
        require_params(index=index, name=name)
        return self.perform_request('PUT', make_path(index, '_alias', name),
                                    params=params, headers=headers,
                                    body=body)

    @query_params('allow_no_indices', 'expand_wildcards',
                  'ignore_unavailable', 'include_type_name',
                  'master_timeout', 'timeout')
    def put_mapping(self, body, index=None, doc_type=None, params=None,
                    headers=None):
        """
        Updates the index mappings.
        `<https://www.elastic.co/guide/en/elasticsearch/reference/7.x/indices-put-mapping.html>`_

        :arg body: The mapping definition
        :arg index: A list of index names the mapping should be added to
            (supports wildcards); use `_all` or omit to add the mapping on all
            indices.
        :arg doc_type: The name of the document type
        :arg include_type_name: Whether a type should be expected in the body
            of the mappings.
        """
        require_params(body=body)
        if doc_type and not index:
            index = '_all'
        return self.perform_request('PUT',
                                    make_path(index, doc_type, '_mapping'),
                                    params=params, headers=headers,
                                    body=body)

    @query_params('allow_no_indices', 'expand_wildcards', 'flat_settings',
                  'ignore_unavailable', 'master_timeout',
                  'preserve_existing', 'timeout')
    def put_settings(self, body, index=None, params=None, headers=None):
        """
        Updates the index settings.
        `<https://www.elastic.co/guide/en/elasticsearch/reference/7.x/indices-update-settings.html>`_

        :arg body: The index settings to be updated
        :arg index: A list of index names; use `_all` or empty string to
            perform the operation on all indices
        :arg preserve_existing: Whether to update existing settings. If set
            to `true` existing settings on an index remain unchanged, the
            default is `false`
        """
        require_params(body=body)
        return self.perform_request('PUT', make_path(index, '_settings'),
                                    params=params, headers=headers,
                                    body=body)

    @query_params('create', 'flat_settings', 'include_type_name',
                  'master_timeout', 'order', 'timeout')
    def put_template(self, name, body, params=None, headers=None):
        """
        Creates or updates an index template.
        `<https://www.elastic.co/guide/en/elasticsearch/reference/7.x/indices-templates.html>`_

        :arg name: The name of the template
        :arg body: The template definition
        :arg create: Whether the index template should only be added if new
            or can also replace an existing one (default: false)
        :arg order: The order for this template when merging multiple
            matching ones (higher numbers are merged later, overriding the
            lower numbers)
        """
        require_params(name=name, body=body)
        return self.perform_request('PUT', make_path('_template', name),
                                    params=params, headers=headers,
                                    body=body)

    @query_params('active_only', 'detailed')
    def recovery(self, index=None, params=None, headers=None):
        """
        Returns information about ongoing index shard recoveries.
        `<https://www.elastic.co/guide/en/elasticsearch/reference/7.x/indices-recovery.html>`_

        :arg index: A list of index names; use `_all` or empty string to
            perform the operation on all indices
        :arg active_only: Display only those recoveries that are currently
            on-going
        :arg detailed: Whether to display detailed information about shard
            recovery
        """
        return self.perform_request('GET', make_path(index, '_recovery'),
                                    params=params, headers=headers)

    @query_params('allow_no_indices', 'expand_wildcards',
                  'ignore_unavailable')
    def refresh(self, index=None, params=None, headers=None):
        """
        Performs the refresh operation in one or more indices.
        `<https://www.elastic.co/guide/en/elasticsearch/reference/7.x/indices-refresh.html>`_

        :arg index: A list of index names; use `_all` or empty string to
            perform the operation on all indices
        """
        return self.perform_request('POST', make_path(index, '_refresh'),
                                    params=params, headers=headers)

    @query_params('allow_no_indices', 'expand_wildcards',
                  'ignore_unavailable')
    def reload_search_analyzers(self, index, params=None, headers=None):
        """
        Reloads an index's search analyzers and their resources.
        `<https://www.elastic.co/guide/en/elasticsearch/reference/7.x/indices-reload-analyzers.html>`_

        :arg index: A list of index names to reload analyzers for
        """
        require_params(index=index)
        return self.perform_request('GET',
                                    make_path(index,
                                              '_reload_search_analyzers'),
                                    params=params, headers=headers)

    @query_params('dry_run', 'include_type_name', 'master_timeout', 'timeout',
                  'wait_for_active_shards')
    def rollover(self, alias, body=None, new_index=None, params=None,
                 headers=None):
        """
        Updates an alias to point to a new index when the existing index is
        considered to be too large or too old.
        `<https://www.elastic.co/guide/en/elasticsearch/reference/7.x/indices-rollover-index.html>`_

        :arg alias: The name of the alias to rollover
        :arg body: The conditions that needs to be met for executing rollover
        :arg new_index: The name of the rollover index
        :arg dry_run: If set to true the rollover action will only be
            validated but not actually performed even if a condition matches.
            The default is false
        """
        require_params(alias=alias)
        return self.perform_request('POST',
                                    make_path(alias, '_rollover', new_index),
                                    params=params, headers=headers,
                                    body=body)

    @query_params('allow_no_indices', 'expand_wildcards',
                  'ignore_unavailable', 'verbose')
    def segments(self, index=None, params=None, headers=None):
        """
        Provides low-level information about segments in a Lucene index.
        `<https://www.elastic.co/guide/en/elasticsearch/reference/7.x/indices-segments.html>`_

        :arg index: A list of index names; use `_all` or empty string to
            perform the operation on all indices
        :arg verbose: Includes detailed memory usage by Lucene.
        """
        return self.perform_request('GET', make_path(index, '_segments'),
                                    params=params, headers=headers)

    @query_params('allow_no_indices', 'expand_wildcards',
                  'ignore_unavailable', 'status')
    def shard_stores(self, index=None, params=None, headers=None):
        """
        Provides store information for shard copies of indices.
        `<https://www.elastic.co/guide/en/elasticsearch/reference/7.x/indices-shards-stores.html>`_

        :arg index: A list of index names; use `_all` or empty string to
            perform the operation on all indices
        :arg status: A list of statuses used to filter on shards to get store
            information for
        """
        return self.perform_request('GET', make_path(index, '_shard_stores'),
                                    params=params, headers=headers)

    @query_params('copy_settings', 'master_timeout', 'timeout',
                  'wait_for_active_shards')
    def shrink(self, index, target, body=None, params=None, headers=None):
        """
        Allow to shrink an existing index into a new index with fewer
        primary shards.
        `<https://www.elastic.co/guide/en/elasticsearch/reference/7.x/indices-shrink-index.html>`_

        :arg index: The name of the source index to shrink
        :arg target: The name of the target index to shrink into
        :arg body: The configuration for the target index (`settings` and
            `aliases`)
        :arg copy_settings: whether or not to copy settings from the source
            index (defaults to false)
        """
        require_params(index=index, target=target)
        return self.perform_request('PUT',
                                    make_path(index, '_shrink', target),
                                    params=params, headers=headers,
                                    body=body)

    @query_params('copy_settings', 'master_timeout', 'timeout',
                  'wait_for_active_shards')
    def split(self, index, target, body=None, params=None, headers=None):
        """
        Allows you to split an existing index into a new index with more
        primary shards.
        `<https://www.elastic.co/guide/en/elasticsearch/reference/7.x/indices-split-index.html>`_

        :arg index: The name of the source index to split
        :arg target: The name of the target index to split into
        :arg body: The configuration for the target index (`settings` and
            `aliases`)
        """
        require_params(index=index, target=target)
        return self.perform_request('PUT', make_path(index, '_split', target),
                                    params=params, headers=headers,
                                    body=body)

    @query_params('completion_fields', 'expand_wildcards', 'fielddata_fields',
                  'fields', 'forbid_closed_indices', 'groups',
                  'include_segment_file_sizes', 'include_unloaded_segments',
                  'level', 'types')
    def stats(self, index=None, metric=None, params=None, headers=None):
        """
        Provides statistics on operations happening in an index.
        `<https://www.elastic.co/guide/en/elasticsearch/reference/7.x/indices-stats.html>`_

        :arg index: A list of index names; use `_all` or empty string to
            perform the operation on all indices
        :arg metric: Limit the information returned the specific metrics.
        :arg completion_fields: A list of fields for `fielddata` and `suggest`
            index metric (supports wildcards)
        :arg fielddata_fields: A list of fields for `fielddata` index metric
            (supports wildcards)
        :arg fields: A list of fields for `fielddata` and `completion` index
            metric (supports wildcards)
        :arg forbid_closed_indices: If set to false stats will also collected
            from closed indices if explicitly specified or if expand_wildcards
            expands to closed indices (default: True)
        :arg groups: A list of search groups for `search` index metric
        :arg include_segment_file_sizes: Whether to report the aggregated disk
            usage of each one of the Lucene index files (only applies if
            segment stats are requested)
        :arg level: Return stats aggregated at cluster, index or shard level
        :arg types: A list of document types for the `indexing` index metric
        """
        return self.perform_request('GET', make_path(index, '_stats', metric),
                                    params=params, headers=headers)

    @query_params('allow_no_indices', 'expand_wildcards',
                  'ignore_unavailable', 'master_timeout', 'timeout',
                  'wait_for_active_shards')
    def unfreeze(self, index, params=None, headers=None):
        """
        Unfreezes an index. When a frozen index is unfrozen, the index goes
        through the normal recovery process and becomes writeable again.
        `<https://www.elastic.co/guide/en/elasticsearch/reference/7.x/unfreeze-index-api.html>`_

        :arg index: The name of the index to unfreeze
        """
        require_params(index=index)
        return self.perform_request('POST', make_path(index, '_unfreeze'),
                                    params=params, headers=headers)

    @query_params('master_timeout', 'timeout')
    def update_aliases(self, body, params=None, headers=None):
        """
        Updates index aliases.
        `<https://www.elastic.co/guide/en/elasticsearch/reference/7.x/indices-aliases.html>`_

        :arg body: The definition of `actions` to perform
        :arg master_timeout: Specify timeout for connection to master
        :arg timeout: Request timeout
        """
        require_params(body=body)
        return self.perform_request('POST', '/_aliases', params=params,
                                    headers=headers, body=body)

    @query_params('allow_no_indices', 'expand_wildcards',
                  'ignore_unavailable', 'only_ancient_segments',
                  'wait_for_completion')
    def upgrade(self, index=None, params=None, headers=None):
        """
        The _upgrade API is no longer useful and will be removed.
        `<https://www.elastic.co/guide/en/elasticsearch/reference/7.x/indices-upgrade.html>`_

        :arg index: A list of index names; use `_all` or empty string to
            perform the operation on all indices
        :arg only_ancient_segments: If true, only ancient (an older Lucene
            major release) segments will be upgraded
        :arg wait_for_completion: Specify whether the request should block
            until the all segments are upgraded (default: false)
        """
        return self.perform_request('POST', make_path(index, '_upgrade'),
                                    params=params, headers=headers)

    @query_params('all_shards', 'allow_no_indices', 'analyze_wildcard',
                  'analyzer', 'default_operator', 'df', 'expand_wildcards',
                  'explain', 'ignore_unavailable', 'lenient', 'q', 'rewrite')
    def validate_query(self, body=None, index=None, doc_type=None,
                       params=None, headers=None):
        """
        Allows a user to validate a potentially expensive query without
        executing it.
        `<https://www.elastic.co/guide/en/elasticsearch/reference/7.x/search-validate.html>`_

        :arg body: The query definition specified with the Query DSL
        :arg index: A list of index names to restrict the operation; use
            `_all` or empty string to perform the operation on all indices
        :arg doc_type: A list of document types to restrict the operation;
            leave empty to perform the operation on all types
        :arg all_shards: Execute validation on all shards instead of one
            random shard per index
        :arg explain: Return detailed information about the error
        :arg q: Query in the Lucene query string syntax
        :arg rewrite: Provide a more detailed explanation showing the actual
            Lucene query that will be executed.
        """
        if doc_type and not index:
            index = '_all'
        return self.perform_request('GET',
                                    make_path(index, doc_type, '_validate',
                                              'query'),
                                    params=params, headers=headers,
                                    body=body)
