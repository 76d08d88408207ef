"""Create, list and restore Elasticsearch snapshots"""
from snapindex._version import __version__
from snapindex.exceptions import *
from snapindex.actions import CLASS_MAP, ListSnapshots, Restore, Snapshot
from snapindex.cli import snapindex_cli, run_mode, select_mode
