"""Unit testing for helpers.getters functions"""
import json
from unittest import TestCase
from mock import Mock
import pytest
from elasticsearch8 import ConnectionError as ESConnectionError
from snapindex.exceptions import ClientException, MissingArgument
from snapindex.helpers.getters import get_repository, get_snapshot
from . import testvars

class TestGetRepository(TestCase):
    """TestGetRepository

    Test helpers.getters.get_repository functionality.
    """
    def test_get_repository_missing_arg(self):
        """test_get_repository_missing_arg

        Should raise a MissingArgument exception if no repository is passed
        """
        client = Mock()
        with pytest.raises(MissingArgument):
            get_repository(client)
        client.snapshot.get_repository.assert_not_called()
    def test_get_repository_positive(self):
        """test_get_repository_positive

        Return the response rendered as JSON text
        """
        client = Mock()
        client.snapshot.get_repository.return_value = testvars.test_repo
        text = get_repository(client, repository=testvars.repo_name)
        assert testvars.test_repo == json.loads(text)
        client.snapshot.get_repository.assert_called_once_with(name=testvars.repo_name)
    def test_get_repository_not_found(self):
        """test_get_repository_not_found

        A NotFoundError is not raised. The error body is returned as text.
        """
        client = Mock()
        client.snapshot.get_repository.side_effect = testvars.not_found(testvars.missing_repo)
        text = get_repository(client, repository=testvars.repo_name)
        assert 'error' in text
        assert 'repository_missing_exception' in text
    def test_get_repository_unreachable(self):
        """test_get_repository_unreachable

        Should raise a ClientException if Elasticsearch cannot be reached
        """
        client = Mock()
        client.snapshot.get_repository.side_effect = ESConnectionError('simulated error')
        with pytest.raises(ClientException, match=r'Unable to reach Elasticsearch'):
            get_repository(client, repository=testvars.repo_name)

class TestGetSnapshot(TestCase):
    """TestGetSnapshot

    Test helpers.getters.get_snapshot functionality.
    """
    def test_get_snapshot_missing_repository_arg(self):
        """test_get_snapshot_missing_repository_arg

        Should raise a MissingArgument exception when repository not passed
        """
        client = Mock()
        with pytest.raises(MissingArgument, match=r'No value for "repository" provided'):
            get_snapshot(client, snapshot=testvars.snap_name)
    def test_get_snapshot_named(self):
        """test_get_snapshot_named

        Should request only the named snapshot
        """
        client = Mock()
        client.snapshot.get.return_value = testvars.snapshot
        text = get_snapshot(client, repository=testvars.repo_name, snapshot=testvars.snap_name)
        assert testvars.snapshot == json.loads(text)
        client.snapshot.get.assert_called_once_with(
            repository=testvars.repo_name, snapshot=testvars.snap_name)
    def test_get_snapshot_all(self):
        """test_get_snapshot_all

        Without a snapshot name, all snapshots are requested
        """
        client = Mock()
        client.snapshot.get.return_value = testvars.snapshot
        get_snapshot(client, repository=testvars.repo_name)
        client.snapshot.get.assert_called_once_with(
            repository=testvars.repo_name, snapshot='_all')
    def test_get_snapshot_not_found(self):
        """test_get_snapshot_not_found

        The error body is returned as text
        """
        client = Mock()
        client.snapshot.get.side_effect = testvars.not_found(testvars.missing_snapshot)
        text = get_snapshot(client, repository=testvars.repo_name, snapshot=testvars.snap_name)
        assert 'snapshot_missing_exception' in text
