class SchemaRegistry:
    """
    Uniform view over the schema container of a document.

    Swagger 2 documents keep their models under a top-level 'definitions'
    mapping, OpenAPI 3 documents under 'components.schemas'. The container is
    picked once, when the registry is created.
    """

    def __init__(self, document):
        self.container_key = None
        self._schemas = {}

        if not isinstance(document, dict):
            return

        definitions = document.get('definitions')
        if isinstance(definitions, dict):
            self.container_key = 'definitions'
            self._schemas = definitions
            return

        components = document.get('components')
        if isinstance(components, dict) and isinstance(components.get('schemas'), dict):
            self.container_key = 'components.schemas'
            self._schemas = components['schemas']

    @staticmethod
    def schema_id(token):
        """
        Convert a reference token to a schema identifier.

        Args:
            token (str): A local pointer such as '#/components/schemas/Pet',
                or a bare identifier such as 'Pet'

        Returns:
            str: The last pointer segment, or the token itself when it is not
                a local pointer
        """
        if not token or not token.startswith('#/'):
            return token
        last_part = token.split('/')[-1]
        return last_part.replace('~1', '/').replace('~0', '~')

    def get(self, identifier):
        if not identifier:
            return None
        return self._schemas.get(identifier)

    def resolve(self, token):
        """Return the schema body a reference token points at, or None."""
        return self.get(self.schema_id(token))

    def all_identifiers(self):
        return list(self._schemas.keys())

    def remove(self, identifier):
        self._schemas.pop(identifier, None)

    def __contains__(self, identifier):
        return identifier in self._schemas

    def __len__(self):
        return len(self._schemas)
