"""NMEA checksum calculation and validation.

NMEA 0183 sentences use a simple XOR checksum for data integrity verification.
The checksum is calculated over all characters between '$' and '*' (exclusive),
then represented as a two-digit uppercase hexadecimal number after the '*'.

Example sentence structure:
    $GPGGA,232200.000,1445.1076,N,02315.4370,W,2,08,1.10,310.5,M,-31.9,M,0000,0000*54
     ^                          checksum content                                 ^^
     payload start                                                   checksum (0x54)
"""

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def calculate_checksum(data: str | bytes) -> int:
    """Calculate the XOR checksum of a payload.

    The NMEA checksum algorithm XORs every byte of the payload. This is a
    simple error-detection mechanism that catches single-bit errors and some
    multi-bit errors. The function is total: any input, including an empty
    one, yields a value in the range 0-255.

    Args:
        data: The payload between '$' and '*' (exclusive), as text or bytes.
            Text is taken character by character; characters outside the
            8-bit range are folded to their low byte.

    Returns:
        Integer checksum value (0-255)

    Example:
        >>> calculate_checksum("GPVTG,230.17,T,,M,0.38,N,0.70,K,D")
        51  # 0x33
    """
    if isinstance(data, str):
        codes = (ord(character) & 0xFF for character in data)
    else:
        codes = iter(data)

    result = 0
    for code in codes:
        result ^= code
    return result


def has_checksum_suffix(content: str) -> bool:
    """Return True if *content* ends with a ``*XX`` hexadecimal suffix.

    Example:
        >>> has_checksum_suffix("GPGSA,A,3*30")
        True
        >>> has_checksum_suffix("GPGSA,A,3")
        False
    """
    return (
        len(content) >= 3
        and content[-3] == "*"
        and content[-2] in _HEX_DIGITS
        and content[-1] in _HEX_DIGITS
    )


def validate_checksum(sentence: str) -> bool:
    """Validate the checksum of an NMEA sentence.

    Unlike ``parse_raw``, which treats the checksum as optional, this check
    requires one: a sentence with no ``*XX`` suffix is reported as invalid.

    Args:
        sentence: Complete NMEA sentence including '$', '*', and checksum.
            Surrounding whitespace (e.g. ``\\r\\n``) is ignored.

    Returns:
        True if the sentence is framed and its checksum matches, False
        otherwise. Never raises.

    Example:
        >>> validate_checksum("$GPVTG,230.17,T,,M,0.38,N,0.70,K,D*33")
        True
    """
    sentence = sentence.strip()
    if not sentence.startswith("$"):
        return False

    content = sentence[1:]
    if not has_checksum_suffix(content):
        return False

    return calculate_checksum(content[:-3]) == int(content[-2:], 16)
