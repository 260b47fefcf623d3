"""Protobuf message classes for the VSS wire schema.

The schema is declared here as a ``FileDescriptorProto`` and registered in a
private descriptor pool, which yields the same message classes ``protoc``
would generate for ``vss.proto``:

.. code-block:: proto

    syntax = "proto3";
    package vss;

    message KeyValue { string key = 1; int64 version = 2; bytes value = 3; }
    message GetObjectRequest { string store_id = 1; string key = 2; }
    message GetObjectResponse { KeyValue value = 2; }
    message PutObjectRequest {
      string store_id = 1;
      optional int64 global_version = 2;
      repeated KeyValue transaction_items = 3;
      repeated KeyValue delete_items = 4;
    }
    message PutObjectResponse {}
    message DeleteObjectRequest { string store_id = 1; KeyValue key_value = 2; }
    message DeleteObjectResponse {}
    message ListKeyVersionsRequest {
      string store_id = 1;
      optional string key_prefix = 2;
      optional int32 page_size = 3;
      optional string page_token = 4;
    }
    message ListKeyVersionsResponse {
      repeated KeyValue key_versions = 1;
      optional string next_page_token = 2;
      optional int64 global_version = 3;
    }
    message ErrorResponse { ErrorCode error_code = 1; string message = 2; }
    enum ErrorCode {
      UNKNOWN = 0;
      CONFLICT_EXCEPTION = 1;
      INVALID_REQUEST_EXCEPTION = 2;
      INTERNAL_SERVER_EXCEPTION = 3;
      NO_SUCH_KEY_EXCEPTION = 4;
      AUTH_EXCEPTION = 5;
    }
"""

from __future__ import annotations

from google.protobuf import descriptor_pb2, descriptor_pool, message_factory
from google.protobuf.internal import enum_type_wrapper

_PACKAGE = "vss"
_FIELD = descriptor_pb2.FieldDescriptorProto

_ERROR_CODES: tuple[tuple[str, int], ...] = (
    ("UNKNOWN", 0),
    ("CONFLICT_EXCEPTION", 1),
    ("INVALID_REQUEST_EXCEPTION", 2),
    ("INTERNAL_SERVER_EXCEPTION", 3),
    ("NO_SUCH_KEY_EXCEPTION", 4),
    ("AUTH_EXCEPTION", 5),
)

# (name, number, type, label, type_name, proto3 optional)
_MESSAGES: tuple[tuple[str, tuple[tuple[str, int, int, int, str, bool], ...]], ...] = (
    (
        "KeyValue",
        (
            ("key", 1, _FIELD.TYPE_STRING, _FIELD.LABEL_OPTIONAL, "", False),
            ("version", 2, _FIELD.TYPE_INT64, _FIELD.LABEL_OPTIONAL, "", False),
            ("value", 3, _FIELD.TYPE_BYTES, _FIELD.LABEL_OPTIONAL, "", False),
        ),
    ),
    (
        "GetObjectRequest",
        (
            ("store_id", 1, _FIELD.TYPE_STRING, _FIELD.LABEL_OPTIONAL, "", False),
            ("key", 2, _FIELD.TYPE_STRING, _FIELD.LABEL_OPTIONAL, "", False),
        ),
    ),
    (
        "GetObjectResponse",
        (("value", 2, _FIELD.TYPE_MESSAGE, _FIELD.LABEL_OPTIONAL, "KeyValue", False),),
    ),
    (
        "PutObjectRequest",
        (
            ("store_id", 1, _FIELD.TYPE_STRING, _FIELD.LABEL_OPTIONAL, "", False),
            ("global_version", 2, _FIELD.TYPE_INT64, _FIELD.LABEL_OPTIONAL, "", True),
            (
                "transaction_items",
                3,
                _FIELD.TYPE_MESSAGE,
                _FIELD.LABEL_REPEATED,
                "KeyValue",
                False,
            ),
            (
                "delete_items",
                4,
                _FIELD.TYPE_MESSAGE,
                _FIELD.LABEL_REPEATED,
                "KeyValue",
                False,
            ),
        ),
    ),
    ("PutObjectResponse", ()),
    (
        "DeleteObjectRequest",
        (
            ("store_id", 1, _FIELD.TYPE_STRING, _FIELD.LABEL_OPTIONAL, "", False),
            ("key_value", 2, _FIELD.TYPE_MESSAGE, _FIELD.LABEL_OPTIONAL, "KeyValue", False),
        ),
    ),
    ("DeleteObjectResponse", ()),
    (
        "ListKeyVersionsRequest",
        (
            ("store_id", 1, _FIELD.TYPE_STRING, _FIELD.LABEL_OPTIONAL, "", False),
            ("key_prefix", 2, _FIELD.TYPE_STRING, _FIELD.LABEL_OPTIONAL, "", True),
            ("page_size", 3, _FIELD.TYPE_INT32, _FIELD.LABEL_OPTIONAL, "", True),
            ("page_token", 4, _FIELD.TYPE_STRING, _FIELD.LABEL_OPTIONAL, "", True),
        ),
    ),
    (
        "ListKeyVersionsResponse",
        (
            (
                "key_versions",
                1,
                _FIELD.TYPE_MESSAGE,
                _FIELD.LABEL_REPEATED,
                "KeyValue",
                False,
            ),
            ("next_page_token", 2, _FIELD.TYPE_STRING, _FIELD.LABEL_OPTIONAL, "", True),
            ("global_version", 3, _FIELD.TYPE_INT64, _FIELD.LABEL_OPTIONAL, "", True),
        ),
    ),
    (
        "ErrorResponse",
        (
            ("error_code", 1, _FIELD.TYPE_ENUM, _FIELD.LABEL_OPTIONAL, "ErrorCode", False),
            ("message", 2, _FIELD.TYPE_STRING, _FIELD.LABEL_OPTIONAL, "", False),
        ),
    ),
)


def _build_file_descriptor() -> descriptor_pb2.FileDescriptorProto:
    """Assemble the ``vss.proto`` file descriptor."""
    file_proto = descriptor_pb2.FileDescriptorProto(
        name="vss.proto",
        package=_PACKAGE,
        syntax="proto3",
    )

    enum_proto = file_proto.enum_type.add(name="ErrorCode")
    for name, number in _ERROR_CODES:
        enum_proto.value.add(name=name, number=number)

    for message_name, fields in _MESSAGES:
        message_proto = file_proto.message_type.add(name=message_name)
        for name, number, field_type, label, type_name, optional in fields:
            field_proto = message_proto.field.add(
                name=name,
                number=number,
                type=field_type,
                label=label,
                json_name=_json_name(name),
            )
            if type_name:
                field_proto.type_name = f".{_PACKAGE}.{type_name}"
            if optional:
                # proto3 explicit presence is modelled as a synthetic oneof.
                field_proto.proto3_optional = True
                field_proto.oneof_index = len(message_proto.oneof_decl)
                message_proto.oneof_decl.add(name=f"_{name}")
    return file_proto


def _json_name(name: str) -> str:
    """Return the lowerCamelCase JSON name protoc assigns to ``name``."""
    head, *tail = name.split("_")
    return head + "".join(part.capitalize() for part in tail)


_POOL = descriptor_pool.DescriptorPool()
DESCRIPTOR = _POOL.AddSerializedFile(_build_file_descriptor().SerializeToString())


def _message_class(name: str) -> type:
    """Return the concrete message class for one schema message."""
    return message_factory.GetMessageClass(
        _POOL.FindMessageTypeByName(f"{_PACKAGE}.{name}")
    )


ErrorCode = enum_type_wrapper.EnumTypeWrapper(
    _POOL.FindEnumTypeByName(f"{_PACKAGE}.ErrorCode")
)
UNKNOWN = ErrorCode.Value("UNKNOWN")
CONFLICT_EXCEPTION = ErrorCode.Value("CONFLICT_EXCEPTION")
INVALID_REQUEST_EXCEPTION = ErrorCode.Value("INVALID_REQUEST_EXCEPTION")
INTERNAL_SERVER_EXCEPTION = ErrorCode.Value("INTERNAL_SERVER_EXCEPTION")
NO_SUCH_KEY_EXCEPTION = ErrorCode.Value("NO_SUCH_KEY_EXCEPTION")
AUTH_EXCEPTION = ErrorCode.Value("AUTH_EXCEPTION")

KeyValue = _message_class("KeyValue")
GetObjectRequest = _message_class("GetObjectRequest")
GetObjectResponse = _message_class("GetObjectResponse")
PutObjectRequest = _message_class("PutObjectRequest")
PutObjectResponse = _message_class("PutObjectResponse")
DeleteObjectRequest = _message_class("DeleteObjectRequest")
DeleteObjectResponse = _message_class("DeleteObjectResponse")
ListKeyVersionsRequest = _message_class("ListKeyVersionsRequest")
ListKeyVersionsResponse = _message_class("ListKeyVersionsResponse")
ErrorResponse = _message_class("ErrorResponse")

__all__ = [
    "AUTH_EXCEPTION",
    "CONFLICT_EXCEPTION",
    "DESCRIPTOR",
    "DeleteObjectRequest",
    "DeleteObjectResponse",
    "ErrorCode",
    "ErrorResponse",
    "GetObjectRequest",
    "GetObjectResponse",
    "INTERNAL_SERVER_EXCEPTION",
    "INVALID_REQUEST_EXCEPTION",
    "KeyValue",
    "ListKeyVersionsRequest",
    "ListKeyVersionsResponse",
    "NO_SUCH_KEY_EXCEPTION",
    "PutObjectRequest",
    "PutObjectResponse",
    "UNKNOWN",
]
