from tornado_esapi.client.utils import NamespacedClient, make_path, \
    query_params, require_params


class SnapshotClient(NamespacedClient):

    @query_params('master_timeout', 'wait_for_completion')
    def create(self, repository, snapshot, body=None, params=None,
               headers=None):
        """
        Creates a snapshot in a repository.
        `<https://www.elastic.co/guide/en/elasticsearch/reference/7.x/modules-snapshots.html>`_

        :arg repository: A repository name
        :arg snapshot: A snapshot name
        :arg body: The snapshot definition
        :arg master_timeout: Explicit operation timeout for connection to
            master node
        :arg wait_for_completion: Should this request wait until the operation
            has completed before returning (default: false)
        """
        require_params(repository=repository, snapshot=snapshot)
        return self.perform_request('PUT',
                                    make_path('_snapshot', repository,
                                              snapshot),
                                    params=params, headers=headers,
                                    body=body)

    @query_params('master_timeout', 'timeout', 'verify')
    def create_repository(self, repository, body, params=None, headers=None):
        """
        Creates a repository.
        `<https://www.elastic.co/guide/en/elasticsearch/reference/7.x/modules-snapshots.html>`_

        :arg repository: A repository name
        :arg body: The repository definition
        :arg verify: Whether to verify the repository after creation
        """
        require_params(repository=repository, body=body)
        return self.perform_request('PUT', make_path('_snapshot', repository),
                                    params=params, headers=headers,
                                    body=body)

    @query_params('master_timeout')
    def delete(self, repository, snapshot, params=None, headers=None):
        """
        Deletes a snapshot.
        `<https://www.elastic.co/guide/en/elasticsearch/reference/7.x/modules-snapshots.html>`_

        :arg repository: A repository name
        :arg snapshot: A snapshot name
        """
        require_params(repository=repository, snapshot=snapshot)
        return self.perform_request('DELETE',
                                    make_path('_snapshot', repository,
                                              snapshot),
                                    params=params, headers=headers)

    @query_params('master_timeout', 'timeout')
    def delete_repository(self, repository, params=None, headers=None):
        """
        Deletes a repository.
        `<https://www.elastic.co/guide/en/elasticsearch/reference/7.x/modules-snapshots.html>`_

        :arg repository: A list of repository names
        """
        require_params(repository=repository)
        return self.perform_request('DELETE',
                                    make_path('_snapshot', repository),
                                    params=params, headers=headers)

    @query_params('ignore_unavailable', 'master_timeout', 'verbose')
    def get(self, repository, snapshot, params=None, headers=None):
        """
        Returns information about a snapshot.
        `<https://www.elastic.co/guide/en/elasticsearch/reference/7.x/modules-snapshots.html>`_

        :arg repository: A repository name
        :arg snapshot: A list of snapshot names
        :arg ignore_unavailable: Whether to ignore unavailable snapshots,
            defaults to false which means a SnapshotMissingException is thrown
        :arg verbose: Whether to show verbose snapshot info or only show the
            basic info found in the repository index blob
        """
        require_params(repository=repository, snapshot=snapshot)
        return self.perform_request('GET',
                                    make_path('_snapshot', repository,
                                              snapshot),
                                    params=params, headers=headers)

    @query_params('local', 'master_timeout')
    def get_repository(self, repository=None, params=None, headers=None):
        """
        Returns information about a repository.
        `<https://www.elastic.co/guide/en/elasticsearch/reference/7.x/modules-snapshots.html>`_

        :arg repository: A list of repository names
        :arg local: Return local information, do not retrieve the state from
            master node (default: false)
        """
        return self.perform_request('GET', make_path('_snapshot', repository),
                                    params=params, headers=headers)

    @query_params('master_timeout', 'wait_for_completion')
    def restore(self, repository, snapshot, body=None, params=None,
                headers=None):
        """
        Restores a snapshot.
        `<https://www.elastic.co/guide/en/elasticsearch/reference/7.x/modules-snapshots.html>`_

        :arg repository: A repository name
        :arg snapshot: A snapshot name
        :arg body: Details of what to restore
        :arg wait_for_completion: Should this request wait until the operation
            has completed before returning (default: false)
        """
        require_params(repository=repository, snapshot=snapshot)
        return self.perform_request('POST',
                                    make_path('_snapshot', repository,
                                              snapshot, '_restore'),
                                    params=params, headers=headers,
                                    body=body)

    @query_params('ignore_unavailable', 'master_timeout')
    def status(self, repository=None, snapshot=None, params=None,
               headers=None):
        """
        Returns information about the status of a snapshot.
        `<https://www.elastic.co/guide/en/elasticsearch/reference/7.x/modules-snapshots.html>`_

        :arg repository: A repository name
        :arg snapshot: A list of snapshot names
        :arg ignore_unavailable: Whether to ignore unavailable snapshots,
            defaults to false which means a SnapshotMissingException is thrown
        """
        return self.perform_request('GET',
                                    make_path('_snapshot', repository,
                                              snapshot, '_status'),
                                    params=params, headers=headers)

    @query_params('master_timeout', 'timeout')
    def verify_repository(self, repository, params=None, headers=None):
        """
        Verifies a repository.
        `<https://www.elastic.co/guide/en/elasticsearch/reference/7.x/modules-snapshots.html>`_

        :arg repository: A repository name
        """
        require_params(repository=repository)
        return self.perform_request('POST',
                                    make_path('_snapshot', repository,
                                              '_verify'),
                                    params=params, headers=headers)
