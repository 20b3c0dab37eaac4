# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Field splitting, option parsing and base64 codecs."""

from ._base64 import (
    decode_adapted,
    decode_bcrypt,
    decode_crypt,
    decode_std,
    decode_std_padded,
    encode_adapted,
    encode_bcrypt,
    encode_crypt,
    encode_std,
    encode_std_padded,
)
from ._options import Option, parse_options
from ._split import DELIMITER, join, split
from ._yescrypt import (
    FLAVOR_DEFAULT,
    YescryptSetting,
    decode64,
    decode64_uint32,
    decode_setting,
    encode64,
    encode64_uint32,
    encode_setting,
)

__all__ = [
    "DELIMITER",
    "FLAVOR_DEFAULT",
    "Option",
    "YescryptSetting",
    "decode64",
    "decode64_uint32",
    "decode_adapted",
    "decode_bcrypt",
    "decode_crypt",
    "decode_setting",
    "decode_std",
    "decode_std_padded",
    "encode64",
    "encode64_uint32",
    "encode_adapted",
    "encode_bcrypt",
    "encode_crypt",
    "encode_setting",
    "encode_std",
    "encode_std_padded",
    "join",
    "parse_options",
    "split",
]
