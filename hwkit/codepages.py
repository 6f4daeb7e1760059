"""Convert text in single-byte code pages to UTF-8."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence

MAX_CODEPAGE_NAME_LEN = 10
_CHUNK_SIZE = 64 * 1024

# Unicode code points for bytes 0x80..0xFF of each code page.
_TABLES: dict[str, tuple[int, ...]] = {
    "cp1250": (
        8364, 9888, 8218, 9888, 8222, 8230, 8224, 8225, 9888, 8240, 352, 8249, 346, 356, 381, 377,
        9888, 8216, 8217, 8220, 8221, 8226, 8211, 8212, 9888, 8482, 353, 8250, 347, 357, 382, 378,
        160, 711, 728, 321, 164, 260, 166, 167, 168, 169, 350, 171, 172, 173, 174, 379,
        176, 177, 731, 322, 180, 181, 182, 183, 184, 261, 351, 187, 317, 733, 318, 380,
        340, 193, 194, 258, 196, 313, 262, 199, 268, 201, 280, 203, 282, 205, 206, 270,
        272, 323, 327, 211, 212, 336, 214, 215, 344, 366, 218, 368, 220, 221, 354, 223,
        341, 225, 226, 259, 228, 314, 263, 231, 269, 233, 281, 235, 283, 237, 238, 271,
        273, 324, 328, 243, 244, 337, 246, 247, 345, 367, 250, 369, 252, 253, 355, 729,
    ),
    "cp1251": (
        1026, 1027, 8218, 1107, 8222, 8230, 8224, 8225, 8364, 8240, 1033, 8249, 1034, 1036, 1035, 1039,
        1106, 8216, 8217, 8220, 8221, 8226, 8211, 8212, 9888, 8482, 1113, 8250, 1114, 1116, 1115, 1119,
        160, 1038, 1118, 1032, 164, 1168, 166, 167, 1025, 169, 1028, 171, 172, 173, 174, 1031,
        176, 177, 1030, 1110, 1169, 181, 182, 183, 1105, 8470, 1108, 187, 1112, 1029, 1109, 1111,
        1040, 1041, 1042, 1043, 1044, 1045, 1046, 1047, 1048, 1049, 1050, 1051, 1052, 1053, 1054, 1055,
        1056, 1057, 1058, 1059, 1060, 1061, 1062, 1063, 1064, 1065, 1066, 1067, 1068, 1069, 1070, 1071,
        1072, 1073, 1074, 1075, 1076, 1077, 1078, 1079, 1080, 1081, 1082, 1083, 1084, 1085, 1086, 1087,
        1088, 1089, 1090, 1091, 1092, 1093, 1094, 1095, 1096, 1097, 1098, 1099, 1100, 1101, 1102, 1103,
    ),
    "cp1252": (
        8364, 9888, 8218, 402, 8222, 8230, 8224, 8225, 710, 8240, 352, 8249, 338, 9888, 381, 9888,
        9888, 8216, 8217, 8220, 8221, 8226, 8211, 8212, 732, 8482, 353, 8250, 339, 9888, 382, 376,
        160, 161, 162, 163, 164, 165, 166, 167, 168, 169, 170, 171, 172, 173, 174, 175,
        176, 177, 178, 179, 180, 181, 182, 183, 184, 185, 186, 187, 188, 189, 190, 191,
        192, 193, 194, 195, 196, 197, 198, 199, 200, 201, 202, 203, 204, 205, 206, 207,
        208, 209, 210, 211, 212, 213, 214, 215, 216, 217, 218, 219, 220, 221, 222, 223,
        224, 225, 226, 227, 228, 229, 230, 231, 232, 233, 234, 235, 236, 237, 238, 239,
        240, 241, 242, 243, 244, 245, 246, 247, 248, 249, 250, 251, 252, 253, 254, 255,
    ),
    "ibm866": (
        1040, 1041, 1042, 1043, 1044, 1045, 1046, 1047, 1048, 1049, 1050, 1051, 1052, 1053, 1054, 1055,
        1056, 1057, 1058, 1059, 1060, 1061, 1062, 1063, 1064, 1065, 1066, 1067, 1068, 1069, 1070, 1071,
        1072, 1073, 1074, 1075, 1076, 1077, 1078, 1079, 1080, 1081, 1082, 1083, 1084, 1085, 1086, 1087,
        9617, 9618, 9619, 9474, 9508, 9569, 9570, 9558, 9557, 9571, 9553, 9559, 9565, 9564, 9563, 9488,
        9492, 9524, 9516, 9500, 9472, 9532, 9566, 9567, 9562, 9556, 9577, 9574, 9568, 9552, 9580, 9575,
        9576, 9572, 9573, 9561, 9560, 9554, 9555, 9579, 9578, 9496, 9484, 9608, 9604, 9612, 9616, 9600,
        1088, 1089, 1090, 1091, 1092, 1093, 1094, 1095, 1096, 1097, 1098, 1099, 1100, 1101, 1102, 1103,
        1025, 1105, 1028, 1108, 1031, 1111, 1038, 1118, 176, 8729, 183, 8730, 8470, 164, 9632, 160,
    ),
    "iso-8859-5": (
        128, 129, 130, 131, 132, 133, 134, 135, 136, 137, 138, 139, 140, 141, 142, 143,
        144, 145, 146, 147, 148, 149, 150, 151, 152, 153, 154, 155, 156, 157, 158, 159,
        160, 1025, 1026, 1027, 1028, 1029, 1030, 1031, 1032, 1033, 1034, 1035, 1036, 173, 1038, 1039,
        1040, 1041, 1042, 1043, 1044, 1045, 1046, 1047, 1048, 1049, 1050, 1051, 1052, 1053, 1054, 1055,
        1056, 1057, 1058, 1059, 1060, 1061, 1062, 1063, 1064, 1065, 1066, 1067, 1068, 1069, 1070, 1071,
        1072, 1073, 1074, 1075, 1076, 1077, 1078, 1079, 1080, 1081, 1082, 1083, 1084, 1085, 1086, 1087,
        1088, 1089, 1090, 1091, 1092, 1093, 1094, 1095, 1096, 1097, 1098, 1099, 1100, 1101, 1102, 1103,
        8470, 1105, 1106, 1107, 1108, 1109, 1110, 1111, 1112, 1113, 1114, 1115, 1116, 167, 1118, 1119,
    ),
    "koi8-r": (
        9472, 9474, 9484, 9488, 9492, 9496, 9500, 9508, 9516, 9524, 9532, 9600, 9604, 9608, 9612, 9616,
        9617, 9618, 9619, 8992, 9632, 8729, 8730, 8776, 8804, 8805, 160, 8993, 176, 178, 183, 247,
        9552, 9553, 9554, 1105, 9555, 9556, 9557, 9558, 9559, 9560, 9561, 9562, 9563, 9564, 9565, 9566,
        9567, 9568, 9569, 1025, 9570, 9571, 9572, 9573, 9574, 9575, 9576, 9577, 9578, 9579, 9580, 169,
        1102, 1072, 1073, 1094, 1076, 1077, 1092, 1075, 1093, 1080, 1081, 1082, 1083, 1084, 1085, 1086,
        1087, 1103, 1088, 1089, 1090, 1091, 1078, 1074, 1100, 1099, 1079, 1096, 1101, 1097, 1095, 1098,
        1070, 1040, 1041, 1062, 1044, 1045, 1060, 1043, 1061, 1048, 1049, 1050, 1051, 1052, 1053, 1054,
        1055, 1071, 1056, 1057, 1058, 1059, 1046, 1042, 1068, 1067, 1047, 1064, 1069, 1065, 1063, 1066,
    ),
    "koi8-u": (
        9472, 9474, 9484, 9488, 9492, 9496, 9500, 9508, 9516, 9524, 9532, 9600, 9604, 9608, 9612, 9616,
        9617, 9618, 9619, 8992, 9632, 8729, 8730, 8776, 8804, 8805, 160, 8993, 176, 178, 183, 247,
        9552, 9553, 9554, 1105, 1108, 9556, 1110, 1111, 9559, 9560, 9561, 9562, 9563, 1169, 9565, 9566,
        9567, 9568, 9569, 1025, 1028, 9571, 1030, 1031, 9574, 9575, 9576, 9577, 9578, 1168, 9580, 169,
        1102, 1072, 1073, 1094, 1076, 1077, 1092, 1075, 1093, 1080, 1081, 1082, 1083, 1084, 1085, 1086,
        1087, 1103, 1088, 1089, 1090, 1091, 1078, 1074, 1100, 1099, 1079, 1096, 1101, 1097, 1095, 1098,
        1070, 1040, 1041, 1062, 1044, 1045, 1060, 1043, 1061, 1048, 1049, 1050, 1051, 1052, 1053, 1054,
        1055, 1071, 1056, 1057, 1058, 1059, 1046, 1042, 1068, 1067, 1047, 1064, 1069, 1065, 1063, 1066,
    ),
}

_ASCII = "".join(map(chr, range(0x80)))
_CHARMAPS: dict[str, str] = {
    name: _ASCII + "".join(map(chr, table)) for name, table in _TABLES.items()
}


class UnknownCodePageError(LookupError):
    """The requested code page is not supported."""


def supported_codepages() -> list[str]:
    """Return the names of the supported code pages."""
    return list(_TABLES)


def _charmap(codepage: str) -> str:
    # Names are compared on their first MAX_CODEPAGE_NAME_LEN characters only.
    prefix = codepage[:MAX_CODEPAGE_NAME_LEN]
    for name, charmap in _CHARMAPS.items():
        if prefix == name[:MAX_CODEPAGE_NAME_LEN]:
            return charmap
    raise UnknownCodePageError(f"code page {codepage!r} is not supported")


def decode_bytes(data: bytes, codepage: str) -> str:
    """Decode ``data`` from ``codepage`` into text."""
    charmap = _charmap(codepage)
    return "".join(charmap[byte] for byte in data)


def convert_file(
    source: str | os.PathLike[str],
    codepage: str,
    destination: str | os.PathLike[str],
) -> None:
    """Read ``source`` in ``codepage`` and write it to ``destination`` as UTF-8."""
    charmap = _charmap(codepage)
    with open(source, "rb") as in_file, open(destination, "wb") as out_file:
        while chunk := in_file.read(_CHUNK_SIZE):
            text = "".join(charmap[byte] for byte in chunk)
            out_file.write(text.encode("utf-8"))


def main(argv: Sequence[str] | None = None) -> int:
    """Convert a code-paged text file to UTF-8."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) < 3:
        print(
            "Convert code-paged text file to utf-8.\n"
            "Usage:\tcp2utf8 <cp-file-in> <code-page> <out-file> \n"
            "Code pages supported:"
        )
        for name in supported_codepages():
            print(f"\t{name}")
        return 1

    input_path, codepage, output_path = args[:3]
    try:
        convert_file(input_path, codepage, output_path)
    except UnknownCodePageError:
        print(
            "Error: code-page is not supported! \n"
            " Run without args to see supported code-pages.",
            file=sys.stderr,
        )
        return 1
    except OSError as exc:
        print(f"{exc.filename} - io error: {exc.strerror}", file=sys.stderr)
        return 1
    return 0