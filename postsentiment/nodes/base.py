"""
base.py - monitored node base classes

Every pipeline node reports running/completed/failed transitions to
shared["monitor"] so a run can be inspected afterwards.
"""

from pocketflow import BatchNode, Node

from postsentiment.utils.monitor import COMPLETED, FAILED, RUNNING, update_status


class MonitoredNode(Node):
    """Node that records its status transitions in the shared store."""

    def _run(self, shared):
        node_name = type(self).__name__
        update_status(shared, node_name=node_name, status=RUNNING)
        try:
            action = super()._run(shared)
        except Exception as e:
            update_status(shared, node_name=node_name, status=FAILED, error=str(e))
            raise
        update_status(shared, node_name=node_name, status=COMPLETED)
        return action


class MonitoredBatchNode(MonitoredNode, BatchNode):
    """
    Batch variant: ``prep`` returns a list and ``exec`` runs once per item.

    Retries (``max_retries`` / ``wait``) and ``exec_fallback`` apply per item.
    """
