# -*- coding: utf-8 -*-
# Generated by the protocol buffer compiler.  DO NOT EDIT!
# source: bilichat/protocol/bilibili/broadcast/message/main/search.proto
"""Generated protocol buffer code."""
from google.protobuf.internal import builder as _builder
from google.protobuf import descriptor as _descriptor
from google.protobuf import descriptor_pool as _descriptor_pool
from google.protobuf import symbol_database as _symbol_database
# @@protoc_insertion_point(imports)

_sym_db = _symbol_database.Default()




DESCRIPTOR = _descriptor_pool.Default().AddSerializedFile(b'\n>bilichat/protocol/bilibili/broadcast/message/main/search.proto\x12\x1f\x62ilibili.broadcast.message.main\"\x1c\n\x08TextNode\x12\x10\n\x08raw_text\x18\x01 \x01(\t\"I\n\rTextParagraph\x12\x38\n\x05nodes\x18\x01 \x03(\x0b\x32).bilibili.broadcast.message.main.TextNode\"n\n\tParagraph\x12\x10\n\x08para_num\x18\x01 \x01(\x03\x12\x11\n\tpara_type\x18\x02 \x01(\x03\x12<\n\x04text\x18\x03 \x01(\x0b\x32..bilibili.broadcast.message.main.TextParagraph\"H\n\x06\x42ubble\x12>\n\nparagraphs\x18\x01 \x03(\x0b\x32*.bilibili.broadcast.message.main.Paragraph\"g\n\nChatResult\x12\x0c\n\x04\x63ode\x18\x01 \x01(\x05\x12\x12\n\nsession_id\x18\x02 \x01(\t\x12\x37\n\x06\x62ubble\x18\x03 \x03(\x0b\x32\'.bilibili.broadcast.message.main.Bubbleb\x06proto3')

_builder.BuildMessageAndEnumDescriptors(DESCRIPTOR, globals())
_builder.BuildTopDescriptorsAndMessages(DESCRIPTOR, 'bilichat.protocol.bilibili.broadcast.message.main.search_pb2', globals())
if _descriptor._USE_C_DESCRIPTORS == False:

  DESCRIPTOR._options = None
  _TEXTNODE._serialized_start=99
  _TEXTNODE._serialized_end=127
  _TEXTPARAGRAPH._serialized_start=129
  _TEXTPARAGRAPH._serialized_end=202
  _PARAGRAPH._serialized_start=204
  _PARAGRAPH._serialized_end=314
  _BUBBLE._serialized_start=316
  _BUBBLE._serialized_end=388
  _CHATRESULT._serialized_start=390
  _CHATRESULT._serialized_end=493
# @@protoc_insertion_point(module_scope)
