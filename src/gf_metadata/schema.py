"""
Protobuf schema for Google Fonts metadata
=========================================

Message classes for the text-format descriptors found in a Google Fonts
checkout: ``METADATA.pb`` family files and gflanguages ``*.textproto`` files.

The descriptors are assembled at import time into a private descriptor pool so
that the project does not depend on generated ``_pb2`` modules. Every field of
``fonts_public.proto`` and ``languages_public.proto`` that appears in a
checkout is modelled, so descriptors are parsed strictly: a field name the
schema does not know is a parse error. Field numbers are irrelevant to text
format and only need to be unique per message.
"""

from google.protobuf import descriptor_pb2, descriptor_pool, message_factory

PACKAGE = "google.fonts"

_F = descriptor_pb2.FieldDescriptorProto

STRING = _F.TYPE_STRING
INT32 = _F.TYPE_INT32
FLOAT = _F.TYPE_FLOAT
BOOL = _F.TYPE_BOOL
MESSAGE = _F.TYPE_MESSAGE
MAP = "map"

# (name, number, type, repeated, message type | (key type, value type) | default)
_MESSAGES: dict[str, list[tuple]] = {
    "FontProto": [
        ("name", 1, STRING, False, None),
        ("style", 2, STRING, False, None),
        ("weight", 3, INT32, False, "400"),
        ("filename", 4, STRING, False, None),
        ("post_script_name", 5, STRING, False, None),
        ("full_name", 6, STRING, False, None),
        ("copyright", 7, STRING, False, None),
    ],
    "AxisSegmentProto": [
        ("tag", 1, STRING, False, None),
        ("min_value", 2, FLOAT, False, None),
        ("max_value", 3, FLOAT, False, None),
        ("default_value", 4, FLOAT, False, None),
    ],
    "SourceFileProto": [
        ("source_file", 1, STRING, False, None),
        ("dest_file", 2, STRING, False, None),
    ],
    "SourceProto": [
        ("repository_url", 1, STRING, False, None),
        ("commit", 2, STRING, False, None),
        ("archive_url", 3, STRING, False, None),
        ("files", 4, MESSAGE, True, "SourceFileProto"),
        ("branch", 5, STRING, False, None),
        ("config_yaml", 6, STRING, False, None),
    ],
    "AxisTargetProto": [
        ("tag", 1, STRING, False, None),
        ("value", 2, FLOAT, False, None),
    ],
    "FamilyFallbackProto": [
        ("axis_target", 1, MESSAGE, True, "AxisTargetProto"),
        ("size_adjust_pct", 2, FLOAT, False, None),
        ("local_src", 3, STRING, True, None),
        ("ascent_override_pct", 4, FLOAT, False, None),
    ],
    "ExemplarCharsProto": [
        ("base", 1, STRING, False, None),
        ("auxiliary", 2, STRING, False, None),
        ("marks", 3, STRING, False, None),
        ("numerals", 4, STRING, False, None),
        ("punctuation", 5, STRING, False, None),
        ("index", 6, STRING, False, None),
    ],
    "SampleTextProto": [
        ("masthead_full", 1, STRING, False, None),
        ("masthead_partial", 2, STRING, False, None),
        ("styles", 3, STRING, False, None),
        ("tester", 4, STRING, False, None),
        ("poster_sm", 5, STRING, False, None),
        ("poster_md", 6, STRING, False, None),
        ("poster_lg", 7, STRING, False, None),
        ("specimen_48", 8, STRING, False, None),
        ("specimen_36", 9, STRING, False, None),
        ("specimen_32", 10, STRING, False, None),
        ("specimen_21", 11, STRING, False, None),
        ("specimen_16", 12, STRING, False, None),
        ("note", 13, STRING, False, None),
    ],
    "FamilyProto": [
        ("name", 1, STRING, False, None),
        ("designer", 2, STRING, False, None),
        ("license", 3, STRING, False, None),
        ("category", 4, STRING, True, None),
        ("date_added", 5, STRING, False, None),
        ("fonts", 6, MESSAGE, True, "FontProto"),
        ("aliases", 7, STRING, True, None),
        ("subsets", 8, STRING, True, None),
        ("ttf_autohint_args", 9, STRING, False, None),
        ("axes", 10, MESSAGE, True, "AxisSegmentProto"),
        ("registry_default_overrides", 11, MAP, True, (STRING, FLOAT)),
        ("source", 12, MESSAGE, False, "SourceProto"),
        ("is_noto", 13, BOOL, False, None),
        ("languages", 14, STRING, True, None),
        ("fallbacks", 15, MESSAGE, True, "FamilyFallbackProto"),
        ("sample_text", 16, MESSAGE, False, "SampleTextProto"),
        ("display_name", 17, STRING, False, None),
        ("sample_glyphs", 18, MAP, True, (STRING, STRING)),
        ("minisite_url", 19, STRING, False, None),
        ("stroke", 20, STRING, False, None),
        ("classifications", 21, STRING, True, None),
        ("primary_script", 22, STRING, False, None),
        ("primary_language", 23, STRING, False, None),
    ],
    "LanguageProto": [
        ("id", 1, STRING, False, None),
        ("language", 2, STRING, False, None),
        ("script", 3, STRING, False, None),
        ("name", 4, STRING, False, None),
        ("preferred_name", 5, STRING, False, None),
        ("autonym", 6, STRING, False, None),
        ("population", 7, INT32, False, None),
        ("region", 8, STRING, True, None),
        ("exemplar_chars", 9, MESSAGE, False, "ExemplarCharsProto"),
        ("sample_text", 10, MESSAGE, False, "SampleTextProto"),
        ("historical", 11, BOOL, False, None),
        ("source", 12, STRING, True, None),
        ("note", 13, STRING, False, None),
    ],
    "RegionProto": [
        ("id", 1, STRING, False, None),
        ("name", 2, STRING, False, None),
        ("population", 3, INT32, False, None),
        ("region_group", 4, STRING, True, None),
    ],
    "ScriptProto": [
        ("id", 1, STRING, False, None),
        ("name", 2, STRING, False, None),
    ],
}


def _map_entry_name(field_name: str) -> str:
    return "".join(part.title() for part in field_name.split("_")) + "Entry"


def _add_map_entry(message, field_name: str, key_type: int, value_type: int) -> str:
    entry = message.nested_type.add(name=_map_entry_name(field_name))
    entry.options.map_entry = True
    entry.field.add(name="key", number=1, type=key_type, label=_F.LABEL_OPTIONAL)
    entry.field.add(name="value", number=2, type=value_type, label=_F.LABEL_OPTIONAL)
    return f".{PACKAGE}.{message.name}.{entry.name}"


def _build_file() -> descriptor_pb2.FileDescriptorProto:
    file_proto = descriptor_pb2.FileDescriptorProto(
        name="gf_metadata/google_fonts.proto", package=PACKAGE, syntax="proto2"
    )
    for message_name, fields in _MESSAGES.items():
        message = file_proto.message_type.add(name=message_name)
        for name, number, kind, repeated, extra in fields:
            label = _F.LABEL_REPEATED if repeated else _F.LABEL_OPTIONAL
            if kind == MAP:
                type_name = _add_map_entry(message, name, *extra)
                message.field.add(
                    name=name, number=number, type=MESSAGE, label=label, type_name=type_name
                )
                continue
            field = message.field.add(name=name, number=number, type=kind, label=label)
            if kind == MESSAGE:
                field.type_name = f".{PACKAGE}.{extra}"
            elif extra is not None:
                field.default_value = extra
    return file_proto


_pool = descriptor_pool.DescriptorPool()
_pool.AddSerializedFile(_build_file().SerializeToString())


def _message_class(name: str) -> type:
    return message_factory.GetMessageClass(_pool.FindMessageTypeByName(f"{PACKAGE}.{name}"))


FontProto = _message_class("FontProto")
AxisSegmentProto = _message_class("AxisSegmentProto")
SourceFileProto = _message_class("SourceFileProto")
SourceProto = _message_class("SourceProto")
AxisTargetProto = _message_class("AxisTargetProto")
FamilyFallbackProto = _message_class("FamilyFallbackProto")
FamilyProto = _message_class("FamilyProto")
ExemplarCharsProto = _message_class("ExemplarCharsProto")
SampleTextProto = _message_class("SampleTextProto")
LanguageProto = _message_class("LanguageProto")
RegionProto = _message_class("RegionProto")
ScriptProto = _message_class("ScriptProto")

__all__ = [
    "AxisSegmentProto",
    "AxisTargetProto",
    "ExemplarCharsProto",
    "FamilyFallbackProto",
    "FamilyProto",
    "FontProto",
    "LanguageProto",
    "RegionProto",
    "SampleTextProto",
    "ScriptProto",
    "SourceFileProto",
    "SourceProto",
]
