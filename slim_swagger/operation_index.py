HTTP_METHODS = ('get', 'put', 'post', 'delete', 'options', 'head', 'patch', 'trace')


def identifier_sort_key(identifier):
    # case-insensitive first, exact string breaks ties
    return (identifier.casefold(), identifier)


class OperationIndex:
    """Lookups over the operations declared in a document's 'paths' table."""

    def __init__(self, document):
        self.document = document

    @property
    def paths(self):
        paths = self.document.get('paths') if isinstance(self.document, dict) else None
        return paths if isinstance(paths, dict) else {}

    def iter_operations(self):
        """
        Walk every operation of every path item.

        Yields:
            tuple: (path, method, operation) for each mapping-valued entry of a
                path item, in document order
        """
        for path, path_item in self.paths.items():
            if not isinstance(path_item, dict):
                continue
            for method, operation in path_item.items():
                if isinstance(operation, dict):
                    yield path, method, operation

    def list_operation_ids(self, qualify_by_tag=False):
        """
        List the operationId of every operation in the document.

        Args:
            qualify_by_tag (bool): Emit one 'tag.operationId' entry per tag
                instead of the bare id; untagged operations are then left out

        Returns:
            list: Sorted operation ids
        """
        operation_ids = []
        for _, _, operation in self.iter_operations():
            operation_id = operation_id_of(operation)
            if not operation_id:
                continue
            if qualify_by_tag:
                tags = operation.get('tags')
                if not isinstance(tags, list):
                    continue
                for tag in tags:
                    operation_ids.append(f"{tag}.{operation_id}")
            else:
                operation_ids.append(operation_id)

        return sorted(operation_ids, key=identifier_sort_key)

    def operations_by_id(self):
        """
        Group operations by their operationId.

        Returns:
            dict: operationId -> list of operations carrying it, in document
                order; operations without an id are left out
        """
        by_id = {}
        for _, _, operation in self.iter_operations():
            operation_id = operation_id_of(operation)
            if operation_id:
                by_id.setdefault(operation_id, []).append(operation)
        return by_id

    def find_operation_by_id(self, operation_id):
        """Return the first operation with this id, or None."""
        matches = self.operations_by_id().get(operation_id)
        return matches[0] if matches else None


def operation_id_of(operation):
    operation_id = operation.get('operationId')
    if isinstance(operation_id, str) and operation_id:
        return operation_id
    return None
