from dataclasses import dataclass
from typing import Optional


@dataclass
class Stats:
    orig_ops: Optional[int] = None
    orig_models: Optional[int] = None
    slim_ops: Optional[int] = None
    slim_models: Optional[int] = None


class StatsCollector:
    """Records operation and model counts before and after slimming."""

    def __init__(self, index, registry):
        self.index = index
        self.registry = registry
        self.stats = Stats()

    def snapshot(self, tag):
        """
        Record the current counts.

        Args:
            tag (str): 'before' for the original document, 'after' for the
                slimmed one
        """
        op_count = len(self.index.list_operation_ids())
        model_count = len(self.registry.all_identifiers())

        if tag == 'before':
            self.stats.orig_ops = op_count
            self.stats.orig_models = model_count
        elif tag == 'after':
            self.stats.slim_ops = op_count
            self.stats.slim_models = model_count
        else:
            raise ValueError(f"Unknown snapshot tag: {tag!r}")

    def report(self, output_location):
        stats = self.stats
        lines = [
            'Results:',
            f"  Original: {stats.orig_ops or 0} operations; {stats.orig_models or 0} models",
            f"  Slimmed:  {stats.slim_ops or 0} operations; {stats.slim_models or 0} models",
            '',
            f"Slimmed swagger spec saved to: {output_location}",
        ]
        return '\n'.join(lines)
