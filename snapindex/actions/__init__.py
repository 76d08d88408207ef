"""Use __init__ to make these not need to be nested under lowercase.Capital"""
from snapindex.actions.restore import Restore
from snapindex.actions.show import ListSnapshots
from snapindex.actions.snapshot import Snapshot

CLASS_MAP = {
    'list' : ListSnapshots,
    'restore' : Restore,
    'create' : Snapshot,
}
