import binascii
import dataclasses
from datetime import datetime, timezone

import pytest
from pydantic import BaseModel

from xmlrpc_codec import Base64, DateTime, Fault, FormattedFloat, MethodCall, MethodResponse
from xmlrpc_codec.extension import SupportsXmlRpcStruct, has_struct_view, struct_view


class TestDateTime:
    def test_from_datetime(self):
        assert DateTime.from_datetime(datetime(1998, 7, 17, 14, 8, 55)).raw == '19980717T14:08:55'

    def test_from_datetime_pads_small_years(self):
        assert DateTime.from_datetime(datetime(33, 1, 2, 3, 4, 5)).raw == '00330102T03:04:05'

    def test_from_datetime_ignores_tzinfo(self):
        value = datetime(2015, 6, 9, 9, 7, 2, tzinfo=timezone.utc)
        assert DateTime.from_datetime(value).raw == '20150609T09:07:02'

    @pytest.mark.parametrize(
        'raw',
        [
            '20150609T09:07:02',
            '2015-06-09T09:07:02',
            '2015-06-09T09:07:02Z',
            '2015-06-09T09:07:02.123+03:00',
        ]
    )
    def test_to_datetime(self, raw):
        assert DateTime(raw).to_datetime() == datetime(2015, 6, 9, 9, 7, 2)

    @pytest.mark.parametrize('raw', ['', 'yesterday', '2015-06-09', '20151309T09:07:02'])
    def test_to_datetime_fails(self, raw):
        with pytest.raises(ValueError):
            DateTime(raw).to_datetime()

    def test_is_immutable(self):
        value = DateTime('20150609T09:07:02')
        with pytest.raises(dataclasses.FrozenInstanceError):
            value.raw = ''  # type: ignore[misc]


class TestBase64:
    @pytest.mark.parametrize('data', [b'', b'\x00', b'hathor', bytes(range(256))])
    def test_bytes_round_trip(self, data):
        assert Base64.from_bytes(data).to_bytes() == data

    def test_whitespace_is_ignored(self):
        assert Base64(' aGF0\r\n\taG9y ').to_bytes() == b'hathor'

    @pytest.mark.parametrize('raw', ['aGF0aG9y!', 'aGF0aG9', 'ünï'])
    def test_invalid_data(self, raw):
        with pytest.raises(ValueError):
            Base64(raw).to_bytes()

    def test_invalid_data_is_a_binascii_error(self):
        with pytest.raises(binascii.Error, match='invalid base64 data'):
            Base64('a').to_bytes()


class TestFormattedFloat:
    def test_pattern(self):
        assert format(FormattedFloat(1.0 / 3.0, '.3f')) == '0.333'
        assert f'{FormattedFloat(1.0 / 3.0, ".3f")}' == '0.333'

    def test_explicit_spec_takes_precedence(self):
        assert format(FormattedFloat(1.0 / 3.0, '.3f'), '.1f') == '0.3'


def test_envelopes():
    assert MethodCall('x').params == []
    assert MethodCall('x') == MethodCall('x', [])
    assert MethodResponse(None) != MethodResponse(False)
    assert Fault(1, 'a') == Fault(1, 'a')
    # the default params are not shared
    assert MethodCall('x').params is not MethodCall('x').params


@dataclasses.dataclass(frozen=True)
class Coordinates:
    lat: float
    lon: float


class Settings(BaseModel):
    verbose: bool = False
    level: int = 3


class Custom:
    def __xmlrpc_struct__(self):
        return {'custom': 1}


class TestStructView:
    def test_protocol(self):
        assert isinstance(Custom(), SupportsXmlRpcStruct)
        assert struct_view(Custom()) == {'custom': 1}

    def test_pydantic_model(self):
        assert struct_view(Settings(level=5)) == {'verbose': False, 'level': 5}

    def test_dataclass(self):
        assert struct_view(Coordinates(1.5, -2.5)) == {'lat': 1.5, 'lon': -2.5}

    def test_dataclass_fields_are_shallow(self):
        @dataclasses.dataclass
        class Route:
            start: Coordinates
            stops: list

        start = Coordinates(0.0, 0.0)
        view = struct_view(Route(start, [1]))
        assert view is not None
        assert view['start'] is start

    @pytest.mark.parametrize('value', [object(), 1, 'a', {'a': 1}, Coordinates, Settings, Custom])
    def test_no_view(self, value):
        assert struct_view(value) is None
        assert not has_struct_view(value)
