"""请求头（x-bili-*-bin）构造。

B站 gRPC 网关要求每次调用都附带设备、地区、账号、网络四类 protobuf 二进制头，
以及 authorization 头。access_key 为空时仍可调用，只是按未登录处理。
"""

from dataclasses import dataclass

from bilichat.domain.models import HeaderSet
from bilichat.protocol import NETWORK_TYPE_WIFI, Device, Locale, Metadata, Network


@dataclass(frozen=True)
class DeviceIdentity:
    """模拟的客户端身份，默认与安卓客户端一致。"""

    mobi_app: str = "android"
    device: str = "phone"
    build: int = 6830300
    channel: str = "bili"
    buvid: str = "XX82B818F96FB2F312B3A1BA44DB41892FF99"
    platform: str = "android"
    timezone: str = "Asia/Shanghai"

    @classmethod
    def from_settings(cls, settings) -> "DeviceIdentity":
        return cls(
            mobi_app=settings.mobi_app,
            device=settings.device,
            build=settings.build,
            channel=settings.channel,
            buvid=settings.buvid,
            platform=settings.platform,
            timezone=settings.timezone,
        )


def build_headers(access_key: str, identity: DeviceIdentity = DeviceIdentity()) -> HeaderSet:
    """构造一次查询使用的全部请求头。"""

    device = Device(
        mobi_app=identity.mobi_app,
        device=identity.device,
        build=identity.build,
        channel=identity.channel,
        buvid=identity.buvid,
        platform=identity.platform,
    )
    locale = Locale(timezone=identity.timezone)
    metadata = Metadata(
        access_key=access_key,
        mobi_app=identity.mobi_app,
        device=identity.device,
        build=identity.build,
        channel=identity.channel,
        buvid=identity.buvid,
        platform=identity.platform,
    )
    network = Network(type=NETWORK_TYPE_WIFI)
    return HeaderSet(
        pairs=(
            ("x-bili-device-bin", device.SerializeToString()),
            ("x-bili-local-bin", locale.SerializeToString()),
            ("x-bili-metadata-bin", metadata.SerializeToString()),
            ("x-bili-network-bin", network.SerializeToString()),
            ("authorization", "identify_v1 " + access_key),
        )
    )
