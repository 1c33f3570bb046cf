"""Core JCE structures: request envelopes and file-storage server lists."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from qqwire.jce.reader import JceReader
from qqwire.jce.writer import JceWriter


class JceStruct(ABC):
    """A structure that can be encoded to and decoded from JCE fields."""

    @abstractmethod
    def to_bytes(self) -> bytes:
        """Encode the structure's fields, without begin/end markers."""

    @abstractmethod
    def read_from(self, reader: JceReader) -> None:
        """Fill the structure's fields from ``reader``."""


@dataclass
class RequestPacket(JceStruct):
    """The outer envelope of a JCE service request."""

    i_version: int = 0
    c_packet_type: int = 0
    i_message_type: int = 0
    i_request_id: int = 0
    s_servant_name: str = ""
    s_func_name: str = ""
    s_buffer: bytes = b""
    i_timeout: int = 0
    context: dict[str, str] = field(default_factory=dict)
    status: dict[str, str] = field(default_factory=dict)

    def to_bytes(self) -> bytes:
        return (
            JceWriter()
            .write_int16(self.i_version, 1)
            .write_byte(self.c_packet_type, 2)
            .write_int32(self.i_message_type, 3)
            .write_int32(self.i_request_id, 4)
            .write_string(self.s_servant_name, 5)
            .write_string(self.s_func_name, 6)
            .write_bytes(self.s_buffer, 7)
            .write_int32(self.i_timeout, 8)
            .write_map_str_str(self.context, 9)
            .write_map_str_str(self.status, 10)
            .getvalue()
        )

    def read_from(self, reader: JceReader) -> None:
        self.i_version = reader.read_int16(1)
        self.c_packet_type = reader.read_byte(2)
        self.i_message_type = reader.read_int32(3)
        self.i_request_id = reader.read_int32(4)
        self.s_servant_name = reader.read_string(5)
        self.s_func_name = reader.read_string(6)
        self.s_buffer = reader.read_bytes(7)
        self.i_timeout = reader.read_int32(8)
        self.context = reader.read_map_str_str(9)
        self.status = reader.read_map_str_str(10)


@dataclass
class RequestDataVersion3(JceStruct):
    """Request payload mapping names to encoded buffers."""

    map: dict[str, bytes] = field(default_factory=dict)

    def to_bytes(self) -> bytes:
        return JceWriter().write_map_str_bytes(self.map, 0).getvalue()

    def read_from(self, reader: JceReader) -> None:
        self.map = reader.read_map_str_byte(0)


@dataclass
class RequestDataVersion2(JceStruct):
    """Request payload mapping names to maps of type names to buffers."""

    map: dict[str, dict[str, bytes]] = field(default_factory=dict)

    def to_bytes(self) -> bytes:
        return JceWriter().write_map_str_map_str_bytes(self.map, 0).getvalue()

    def read_from(self, reader: JceReader) -> None:
        self.map = reader.read_map_str_map_str_byte(0)


@dataclass
class SsoServerInfo(JceStruct):
    server: str = ""
    port: int = 0
    location: str = ""

    def to_bytes(self) -> bytes:
        return (
            JceWriter()
            .write_string(self.server, 1)
            .write_int32(self.port, 2)
            .write_string(self.location, 8)
            .getvalue()
        )

    def read_from(self, reader: JceReader) -> None:
        self.server = reader.read_string(1)
        self.port = reader.read_int32(2)
        self.location = reader.read_string(8)


@dataclass
class FileStorageServerInfo(JceStruct):
    server: str = ""
    port: int = 0

    def to_bytes(self) -> bytes:
        return JceWriter().write_string(self.server, 1).write_int32(self.port, 2).getvalue()

    def read_from(self, reader: JceReader) -> None:
        self.server = reader.read_string(1)
        self.port = reader.read_int32(2)


@dataclass
class BigDataIPInfo(JceStruct):
    type: int = 0
    server: str = ""
    port: int = 0

    def to_bytes(self) -> bytes:
        return (
            JceWriter()
            .write_int64(self.type, 0)
            .write_string(self.server, 1)
            .write_int64(self.port, 2)
            .getvalue()
        )

    def read_from(self, reader: JceReader) -> None:
        self.type = reader.read_int64(0)
        self.server = reader.read_string(1)
        self.port = reader.read_int64(2)


@dataclass
class BigDataIPList(JceStruct):
    service_type: int = 0
    ip_list: list[BigDataIPInfo] = field(default_factory=list)
    fragment_size: int = 0

    def to_bytes(self) -> bytes:
        return (
            JceWriter()
            .write_int64(self.service_type, 0)
            .write_struct_slice(self.ip_list, 1)
            .write_int64(self.fragment_size, 3)
            .getvalue()
        )

    def read_from(self, reader: JceReader) -> None:
        self.service_type = reader.read_int64(0)
        self.ip_list = reader.read_struct_list(BigDataIPInfo, 1)
        self.fragment_size = reader.read_int64(3)


@dataclass
class BigDataChannel(JceStruct):
    ip_lists: list[BigDataIPList] = field(default_factory=list)
    sig_session: bytes = b""
    key_session: bytes = b""
    sig_uin: int = 0
    connect_flag: int = 0
    pb_buf: bytes = b""

    def to_bytes(self) -> bytes:
        return (
            JceWriter()
            .write_struct_slice(self.ip_lists, 0)
            .write_bytes(self.sig_session, 1)
            .write_bytes(self.key_session, 2)
            .write_int64(self.sig_uin, 3)
            .write_int32(self.connect_flag, 4)
            .write_bytes(self.pb_buf, 5)
            .getvalue()
        )

    def read_from(self, reader: JceReader) -> None:
        self.ip_lists = reader.read_struct_list(BigDataIPList, 0)
        self.sig_session = reader.read_bytes(1)
        self.key_session = reader.read_bytes(2)
        self.sig_uin = reader.read_int64(3)
        self.connect_flag = reader.read_int32(4)
        self.pb_buf = reader.read_bytes(5)


@dataclass
class FileStoragePushFSSvcList(JceStruct):
    """Server lists pushed for file storage and big-data transfers."""

    upload_list: list[FileStorageServerInfo] = field(default_factory=list)
    pic_download_list: list[FileStorageServerInfo] = field(default_factory=list)
    g_pic_download_list: list[FileStorageServerInfo] = field(default_factory=list)
    qzone_proxy_service_list: list[FileStorageServerInfo] = field(default_factory=list)
    url_encode_service_list: list[FileStorageServerInfo] = field(default_factory=list)
    big_data_channel: BigDataChannel = field(default_factory=BigDataChannel)
    vip_emotion_list: list[FileStorageServerInfo] = field(default_factory=list)
    c2c_pic_down_list: list[FileStorageServerInfo] = field(default_factory=list)
    ptt_list: bytes = b""

    def to_bytes(self) -> bytes:
        return (
            JceWriter()
            .write_struct_slice(self.upload_list, 0)
            .write_struct_slice(self.pic_download_list, 1)
            .write_struct_slice(self.g_pic_download_list, 2)
            .write_struct_slice(self.qzone_proxy_service_list, 3)
            .write_struct_slice(self.url_encode_service_list, 4)
            .write_struct(self.big_data_channel, 5)
            .write_struct_slice(self.vip_emotion_list, 6)
            .write_struct_slice(self.c2c_pic_down_list, 7)
            .write_bytes(self.ptt_list, 10)
            .getvalue()
        )

    def read_from(self, reader: JceReader) -> None:
        self.upload_list = reader.read_struct_list(FileStorageServerInfo, 0)
        self.pic_download_list = reader.read_struct_list(FileStorageServerInfo, 1)
        self.g_pic_download_list = reader.read_struct_list(FileStorageServerInfo, 2)
        self.qzone_proxy_service_list = reader.read_struct_list(FileStorageServerInfo, 3)
        self.url_encode_service_list = reader.read_struct_list(FileStorageServerInfo, 4)
        self.big_data_channel = reader.read_jce_struct(BigDataChannel(), 5)
        self.vip_emotion_list = reader.read_struct_list(FileStorageServerInfo, 6)
        self.c2c_pic_down_list = reader.read_struct_list(FileStorageServerInfo, 7)
        self.ptt_list = reader.read_bytes(10)