class SchemaNotFoundError(Exception):
    """
    Raised when a GSettings schema is neither in the local compiled-schema
    directory nor in the system-wide registry.
    """

    def __init__(self, schema_id: str):
        self.schema_id = schema_id
        super().__init__(f'Schema "{schema_id}" not found.')
