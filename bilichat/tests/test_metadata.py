from bilichat.protocol import NETWORK_TYPE_WIFI, Device, Locale, Metadata, Network
from bilichat.providers.metadata import DeviceIdentity, build_headers


def test_build_headers_keys_and_auth():
    headers = build_headers("abc")
    keys = [k for k, _ in headers.as_metadata()]
    assert keys == [
        "x-bili-device-bin",
        "x-bili-local-bin",
        "x-bili-metadata-bin",
        "x-bili-network-bin",
        "authorization",
    ]
    assert headers.get("authorization") == "identify_v1 abc"
    for key in keys[:-1]:
        assert isinstance(headers.get(key), bytes)


def test_build_headers_unauthenticated_mode():
    headers = build_headers("")
    assert headers.get("authorization") == "identify_v1 "
    meta = Metadata.FromString(headers.get("x-bili-metadata-bin"))
    assert meta.access_key == ""
    assert meta.mobi_app == "android"


def test_build_headers_binary_payloads():
    identity = DeviceIdentity(build=1, buvid="B", timezone="UTC")
    headers = build_headers("key", identity)

    device = Device.FromString(headers.get("x-bili-device-bin"))
    assert (device.mobi_app, device.device, device.build, device.buvid) == ("android", "phone", 1, "B")

    locale = Locale.FromString(headers.get("x-bili-local-bin"))
    assert locale.timezone == "UTC"

    meta = Metadata.FromString(headers.get("x-bili-metadata-bin"))
    assert meta.access_key == "key"
    assert meta.build == 1

    network = Network.FromString(headers.get("x-bili-network-bin"))
    assert network.type == NETWORK_TYPE_WIFI


def test_device_identity_from_settings():
    class SettingsStub:
        mobi_app = "iphone"
        device = "pad"
        build = 42
        channel = "apple"
        buvid = "X"
        platform = "ios"
        timezone = "UTC"

    identity = DeviceIdentity.from_settings(SettingsStub())
    assert identity == DeviceIdentity("iphone", "pad", 42, "apple", "X", "ios", "UTC")
