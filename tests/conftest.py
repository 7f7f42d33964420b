import pytest


@pytest.fixture
def petstore():
    """OpenAPI 3 document: getPet uses Pet, listPets uses Pet and Error."""
    return {
        'openapi': '3.0.0',
        'info': {'title': 'Petstore', 'version': '1.0.0'},
        'tags': [{'name': 'pets'}, {'name': 'store'}],
        'paths': {
            '/pets': {
                'get': {
                    'operationId': 'listPets',
                    'tags': ['pets'],
                    'responses': {
                        '200': {
                            'content': {
                                'application/json': {
                                    'schema': {'type': 'array', 'items': {'$ref': '#/components/schemas/Pet'}}
                                }
                            }
                        },
                        'default': {
                            'content': {
                                'application/json': {'schema': {'$ref': '#/components/schemas/Error'}}
                            }
                        },
                    },
                }
            },
            '/pets/{petId}': {
                'get': {
                    'operationId': 'getPet',
                    'tags': ['pets', 'store'],
                    'parameters': [{'name': 'petId', 'in': 'path', 'required': True, 'schema': {'type': 'string'}}],
                    'responses': {
                        '200': {
                            'content': {
                                'application/json': {'schema': {'$ref': '#/components/schemas/Pet'}}
                            }
                        }
                    },
                }
            },
        },
        'components': {
            'schemas': {
                'Pet': {'type': 'object', 'properties': {'name': {'type': 'string'}}},
                'Error': {'type': 'object', 'properties': {'message': {'type': 'string'}}},
                'Unused': {'type': 'object'},
            }
        },
    }


@pytest.fixture
def swagger2():
    """Swagger 2 document with a reference chain and a cycle under 'definitions'."""
    return {
        'swagger': '2.0',
        'info': {'title': 'Orders', 'version': '1.0'},
        'paths': {
            '/orders': {
                'parameters': [{'name': 'X-Trace', 'in': 'header', 'type': 'string'}],
                'get': {
                    'operationId': 'listOrders',
                    'tags': ['orders'],
                    'responses': {'200': {'schema': {'type': 'array', 'items': {'$ref': '#/definitions/Order'}}}},
                },
                'post': {
                    'operationId': 'createOrder',
                    'tags': ['orders'],
                    'parameters': [{'in': 'body', 'name': 'body', 'schema': {'$ref': '#/definitions/NewOrder'}}],
                    'responses': {'201': {'schema': {'$ref': '#/definitions/Order'}}},
                },
            },
            '/customers/{id}': {
                'get': {
                    'operationId': 'getCustomer',
                    'responses': {'200': {'schema': {'$ref': '#/definitions/Customer'}}},
                }
            },
        },
        'definitions': {
            'Order': {
                'type': 'object',
                'properties': {
                    'customer': {'$ref': '#/definitions/Customer'},
                    'lines': {'type': 'array', 'items': {'$ref': '#/definitions/OrderLine'}},
                },
            },
            'OrderLine': {'type': 'object', 'properties': {'order': {'$ref': '#/definitions/Order'}}},
            'Customer': {'type': 'object', 'properties': {'orders': {'type': 'array', 'items': {'$ref': '#/definitions/Order'}}}},
            'NewOrder': {'allOf': [{'$ref': '#/definitions/Address'}, {'properties': {'note': {'type': 'string'}}}]},
            'Address': {'type': 'object'},
            'Orphan': {'type': 'object'},
        },
    }
