# -*- coding: utf-8 -*-
# Generated by the protocol buffer compiler.  DO NOT EDIT!
# source: bilichat/protocol/bilibili/app/search/v2/search.proto
"""Generated protocol buffer code."""
from google.protobuf.internal import builder as _builder
from google.protobuf import descriptor as _descriptor
from google.protobuf import descriptor_pool as _descriptor_pool
from google.protobuf import symbol_database as _symbol_database
# @@protoc_insertion_point(imports)

_sym_db = _symbol_database.Default()


from bilichat.protocol.bilibili.broadcast.message.main import search_pb2 as bilichat_dot_protocol_dot_bilibili_dot_broadcast_dot_message_dot_main_dot_search__pb2


DESCRIPTOR = _descriptor_pool.Default().AddSerializedFile(b'\n5bilichat/protocol/bilibili/app/search/v2/search.proto\x12\x16\x62ilibili.app.search.v2\x1a>bilichat/protocol/bilibili/broadcast/message/main/search.proto\"\"\n\x11SubmitChatTaskReq\x12\r\n\x05query\x18\x01 \x01(\t\"5\n\x11SubmitChatTaskRsp\x12\x0c\n\x04\x63ode\x18\x01 \x01(\x03\x12\x12\n\nsession_id\x18\x02 \x01(\t\"5\n\x10GetChatResultReq\x12\r\n\x05query\x18\x01 \x01(\t\x12\x12\n\nsession_id\x18\x02 \x01(\t2\xd8\x01\n\x06Search\x12\x66\n\x0eSubmitChatTask\x12).bilibili.app.search.v2.SubmitChatTaskReq\x1a).bilibili.app.search.v2.SubmitChatTaskRsp\x12\x66\n\rGetChatResult\x12(.bilibili.app.search.v2.GetChatResultReq\x1a+.bilibili.broadcast.message.main.ChatResultb\x06proto3')

_builder.BuildMessageAndEnumDescriptors(DESCRIPTOR, globals())
_builder.BuildTopDescriptorsAndMessages(DESCRIPTOR, 'bilichat.protocol.bilibili.app.search.v2.search_pb2', globals())
if _descriptor._USE_C_DESCRIPTORS == False:

  DESCRIPTOR._options = None
  _SUBMITCHATTASKREQ._serialized_start=145
  _SUBMITCHATTASKREQ._serialized_end=179
  _SUBMITCHATTASKRSP._serialized_start=181
  _SUBMITCHATTASKRSP._serialized_end=234
  _GETCHATRESULTREQ._serialized_start=236
  _GETCHATRESULTREQ._serialized_end=289
  _SEARCH._serialized_start=292
  _SEARCH._serialized_end=508
# @@protoc_insertion_point(module_scope)
