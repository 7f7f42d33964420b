from enum import Enum

from slim_swagger.operation_index import HTTP_METHODS, OperationIndex, operation_id_of
from slim_swagger.reference_resolver import resolve_references
from slim_swagger.schema_registry import SchemaRegistry
from slim_swagger.spec_io import render_json
from slim_swagger.stats import StatsCollector


class FilterOutcome(Enum):
    APPLIED = 'applied'
    EMPTY_SELECTION = 'empty-selection'


class SelectionEngine:
    """
    Slims a document in place down to a selection of operations.

    The engine takes ownership of the document: paths, operations and schemas
    are deleted from it directly. Pass a copy.deepcopy() of the document when
    the original is still needed.
    """

    def __init__(self, document):
        self.document = document
        self.index = OperationIndex(document)
        self.registry = SchemaRegistry(document)
        self.stats = StatsCollector(self.index, self.registry)

    def filter(self, operations, models=None, invert=False):
        """
        Keep the selected operations and the schemas they depend on.

        Args:
            operations (list): operationId values to keep, or to drop when
                invert is set
            models (list, optional): Schema ids added to the kept schemas, or
                removed from them when invert is set
            invert (bool): Treat both lists as deny-lists

        Returns:
            FilterOutcome: EMPTY_SELECTION when no operations were given and
                the document was left untouched, APPLIED otherwise
        """
        if not operations:
            return FilterOutcome.EMPTY_SELECTION

        self.stats.snapshot('before')

        if invert:
            excluded = set(operations)
            allowed = [o for o in self.index.list_operation_ids() if o not in excluded]
        else:
            allowed = list(operations)
        allowed = list(dict.fromkeys(allowed))

        self._remove_operations(allowed)
        self._remove_models(allowed, models or [], invert)

        self.stats.snapshot('after')
        return FilterOutcome.APPLIED

    def model_refs(self, operation_ids):
        """
        Collect the schema references of a list of operations.

        Every operation carrying a listed id is walked, into one shared list,
        so schemas used by several operations are only reported once.
        """
        by_id = self.index.operations_by_id()

        refs = []
        for operation_id in operation_ids:
            for operation in by_id.get(operation_id, []):
                resolve_references(operation, self.registry, refs)
        return refs

    def prune_tags(self):
        """
        Drop top-level tag declarations that no remaining operation uses.

        Returns:
            list: Names of the removed tags
        """
        tags = self.document.get('tags') if isinstance(self.document, dict) else None
        if not isinstance(tags, list):
            return []

        used_tags = set()
        for _, _, operation in self.index.iter_operations():
            operation_tags = operation.get('tags')
            if isinstance(operation_tags, list):
                used_tags.update(t for t in operation_tags if isinstance(t, str))

        kept = []
        removed = []
        for tag in tags:
            if isinstance(tag, dict) and tag.get('name') not in used_tags:
                removed.append(tag.get('name'))
            else:
                kept.append(tag)
        tags[:] = kept
        return removed

    def to_json(self):
        return render_json(self.document)

    def _remove_operations(self, allowed):
        allowed = set(allowed)
        paths = self.index.paths

        for path in list(paths.keys()):
            path_item = paths[path]
            if not isinstance(path_item, dict):
                continue

            removed_any = False
            for method in list(path_item.keys()):
                operation = path_item[method]
                if not isinstance(operation, dict):
                    continue
                operation_id = operation_id_of(operation)
                # operations without an id are never matched, so never removed
                if operation_id and operation_id not in allowed:
                    del path_item[method]
                    removed_any = True

            # only path items emptied by this pass are dropped
            if removed_any and not any(str(key).lower() in HTTP_METHODS for key in path_item):
                del paths[path]

    def _remove_models(self, allowed, models, invert):
        retained = {self.registry.schema_id(ref) for ref in self.model_refs(allowed)}
        if invert:
            retained.difference_update(models)
        else:
            retained.update(models)

        for model_id in self.registry.all_identifiers():
            if model_id not in retained:
                self.registry.remove(model_id)
