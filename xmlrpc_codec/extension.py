# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Caller-defined types can take part in encoding only by presenting themselves as a struct (a name/value mapping).

There are three ways of doing so, tried in this order:

1. implementing `__xmlrpc_struct__()` (see `SupportsXmlRpcStruct`);
2. being a pydantic model, its `model_dump()` is used;
3. being a dataclass instance, its fields are used (shallow, nested values are encoded by kind as usual).

>>> from dataclasses import dataclass
>>> @dataclass
... class Point:
...     x: int
...     y: int
>>> struct_view(Point(1, 2))
{'x': 1, 'y': 2}
>>> struct_view(object()) is None
True
"""

import dataclasses
from collections.abc import Mapping
from typing import Any, Optional, Protocol, runtime_checkable

from pydantic import BaseModel

from xmlrpc_codec.types import Value


@runtime_checkable
class SupportsXmlRpcStruct(Protocol):
    def __xmlrpc_struct__(self) -> Mapping[str, Value]:
        ...


def has_struct_view(value: Any) -> bool:
    # classes are never values, even when instances of them are
    if isinstance(value, type):
        return False
    return isinstance(value, (SupportsXmlRpcStruct, BaseModel)) or dataclasses.is_dataclass(value)


def struct_view(value: Any) -> Optional[Mapping[str, Value]]:
    """Return the name/value view of a caller-defined value, or `None` if it has none."""
    if isinstance(value, type):
        return None
    if isinstance(value, SupportsXmlRpcStruct):
        return value.__xmlrpc_struct__()
    if isinstance(value, BaseModel):
        return value.model_dump()
    if dataclasses.is_dataclass(value):
        return {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
    return None
