"""Test setup"""

# pylint: disable=C0115, C0116
import logging
import os
import random
import shutil
import string
import tempfile
import time
import warnings
from unittest import SkipTest, TestCase
from elasticsearch8 import Elasticsearch
from elasticsearch8.exceptions import ConnectionError as ESConnectionError
from elasticsearch8.exceptions import ElasticsearchWarning
from click import testing as clicktest
from snapindex.cli import snapindex_cli

client = None

HOST = os.environ.get('TEST_ES_SERVER')


def random_directory():
    dirname = ''.join(
        random.choice(string.ascii_uppercase + string.digits) for _ in range(8)
    )
    return tempfile.mkdtemp(suffix=dirname)


def get_client():
    # pylint: disable=global-statement, invalid-name
    global client
    if not HOST:
        raise SkipTest('TEST_ES_SERVER is not set.')
    if client is not None:
        return client

    client = Elasticsearch(hosts=HOST, request_timeout=300)

    # wait for yellow status
    for _ in range(100):
        time.sleep(0.1)
        try:
            # pylint: disable=E1123
            client.cluster.health(wait_for_status='yellow')
            return client
        except ESConnectionError:
            continue
    # timeout
    raise SkipTest("Elasticsearch failed to start.")


class SnapIndexTestCase(TestCase):
    def setUp(self):
        super().setUp()
        self.logger = logging.getLogger('SnapIndexTestCase.setUp')
        self.client = get_client()
        self.args = {'repository': 'test_repository', 'name': 'test_snapshot'}
        # The snapshot location must be in path.repo on the node, which is not
        # necessarily the machine running the tests.
        nodesinfo = self.client.nodes.info()
        nodename = list(nodesinfo['nodes'].keys())[0]
        path = nodesinfo['nodes'][nodename]['settings']['path']
        if 'repo' in path:
            repo = path['repo']
            self.args['location'] = repo[0] if isinstance(repo, list) else repo
        else:
            self.logger.warning('path.repo is not configured!')
            self.args['location'] = random_directory()
        self.runner = clicktest.CliRunner()
        self.logger.debug('setUp completed...')

    def tearDown(self):
        self.logger = logging.getLogger('SnapIndexTestCase.tearDown')
        self.logger.debug('tearDown initiated...')
        self.delete_repositories()
        warnings.filterwarnings("ignore", category=ElasticsearchWarning)
        indices = list(self.client.indices.get(index='snapindex-*').keys())
        if indices:
            self.client.indices.delete(index=','.join(indices))
        if os.path.exists(self.args['location']) and self.args['location'].startswith(
            tempfile.gettempdir()
        ):
            shutil.rmtree(self.args['location'])

    def invoke(self, *args, **kwargs):
        """Run snapindex against the test cluster"""
        return self.runner.invoke(
            snapindex_cli, ['-e', HOST, '-b', self.args['repository']] + list(args), **kwargs)

    def create_index(self, name, shards=1):
        self.client.indices.create(
            index=name, settings={'number_of_shards': shards, 'number_of_replicas': 0})
        # pylint: disable=E1123
        self.client.cluster.health(index=name, wait_for_status='yellow')

    def delete_repositories(self):
        result = self.client.snapshot.get_repository(name='*')
        for repo in result:
            snaps = self.client.snapshot.get(repository=repo, snapshot='*')
            for snap in snaps['snapshots']:
                self.client.snapshot.delete(repository=repo, snapshot=snap['snapshot'])
            self.client.snapshot.delete_repository(name=repo)
