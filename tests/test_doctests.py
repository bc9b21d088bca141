import doctest
import importlib

import pytest

MODULES_WITH_DOCTESTS = [
    'xmlrpc_codec.codec',
    'xmlrpc_codec.decoder',
    'xmlrpc_codec.encoder',
    'xmlrpc_codec.extension',
    'xmlrpc_codec.types',
    'xmlrpc_codec.serialization.chunk_serializer',
    'xmlrpc_codec.serialization.kinds',
    'xmlrpc_codec.serialization.serializer',
    'xmlrpc_codec.serialization.encoding.base64',
    'xmlrpc_codec.serialization.encoding.bool',
    'xmlrpc_codec.serialization.encoding.datetime',
    'xmlrpc_codec.serialization.encoding.double',
    'xmlrpc_codec.serialization.encoding.int',
    'xmlrpc_codec.serialization.encoding.nil',
    'xmlrpc_codec.serialization.encoding.string',
    'xmlrpc_codec.serialization.compound_encoding.array',
    'xmlrpc_codec.serialization.compound_encoding.struct',
    'xmlrpc_codec.utils.result',
]


@pytest.mark.parametrize('module_name', MODULES_WITH_DOCTESTS)
def test_doctests(module_name):
    module = importlib.import_module(module_name)
    failed, attempted = doctest.testmod(module, report=True)
    assert attempted > 0
    assert failed == 0
