def resolve_references(item, registry, visited=None):
    """
    Collect every schema reference reachable from an item.

    The item can be an operation, a schema body or any other piece of the
    document. Each '$ref' that resolves in the registry is recorded once and
    the schema it points at is walked as well, so references are followed
    transitively. References that do not resolve are skipped.

    Args:
        item: Any node of the document (dict, list or scalar)
        registry (SchemaRegistry): Registry used to resolve '$ref' tokens
        visited (list, optional): Tokens already collected; extended in place

    Returns:
        list: The visited tokens, in the order they were first reached
    """
    if visited is None:
        visited = []
    seen = set(visited)

    # Explicit stack instead of recursion; children are pushed in reverse so
    # nodes come off in the same order a recursive walk would visit them.
    stack = [item]
    while stack:
        node = stack.pop()

        if isinstance(node, list):
            stack.extend(reversed(node))
            continue
        if not isinstance(node, dict):
            continue

        children = list(node.values())
        children.reverse()
        stack.extend(children)

        ref = node.get('$ref')
        if isinstance(ref, str) and ref not in seen:
            model = registry.resolve(ref)
            if model is not None:
                seen.add(ref)
                visited.append(ref)
                # the referenced schema is walked before the node's own values
                stack.append(model)

    return visited
