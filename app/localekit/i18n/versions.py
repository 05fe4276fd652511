"""Versioned texts: several variants of a translation packed in one string.

A versioned text holds a base text plus variants selected by a modifier
label (a plural bucket or any custom identifier). It is encoded as::

    VARIANT_SEPARATOR + base
        + VARIANT_SEPARATOR + label1 + LABEL_SEPARATOR + text1
        + VARIANT_SEPARATOR + label2 + LABEL_SEPARATOR + text2 ...

A text with no variants is stored as the plain base text. The two separators
are non-characters and must never appear in translated texts.

Example:
    >>> text = versioned("%d apples").zero("no apples").one("one apple").encode()
    >>> select_plural_variant(0, decode_all(text))
    'no apples'
    >>> select_plural_variant(7, decode_all(text))
    '7 apples'
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Tuple

from localekit.i18n.exceptions import (
    InvalidFieldValueError,
    MalformedVersionSegmentError,
    NoMatchingVariantError,
)

VARIANT_SEPARATOR = "\uFFFF"
LABEL_SEPARATOR = "\uFFFE"

# Plural modifier labels
ZERO = "0"
ONE = "1"
TWO = "2"
THREE = "3"
FOUR = "4"
FIVE = "5"
SIX = "6"
TEN = "T"
TWO_THREE_FOUR = "C"
MANY = "M"

PLURAL_PLACEHOLDER = "%d"


def is_versioned(text: str) -> bool:
    return text.startswith(VARIANT_SEPARATOR)


def modifier(text: str, label: Any, variant: str) -> str:
    """Append a variant to a plain or already versioned text.

    Args:
        text: Plain base text, or a previously versioned text.
        label: Modifier identifier; converted with ``str()``.
        variant: Text to return for this modifier.

    Returns:
        The versioned text.

    Raises:
        InvalidFieldValueError: If the label or the variant text is empty.
    """
    label = _check_variant(label, variant)
    prefix = "" if is_versioned(text) else VARIANT_SEPARATOR
    return f"{prefix}{text}{VARIANT_SEPARATOR}{label}{LABEL_SEPARATOR}{variant}"


def _check_variant(label: Any, variant: str) -> str:
    if label is None or str(label) == "":
        raise InvalidFieldValueError("Missing modifier.", modifier=label)
    if not variant:
        raise InvalidFieldValueError(
            f"Missing text for modifier '{label}'.", modifier=label
        )
    return str(label)


def _split_segment(segment: str) -> Tuple[str, str]:
    parts = segment.split(LABEL_SEPARATOR)
    if len(parts) != 2 or not parts[0] or not parts[1]:
        raise MalformedVersionSegmentError(f"Invalid text version for '{segment}'.")
    return parts[0], parts[1]


def _segments(text: str) -> List[str]:
    # A leading separator produces an empty first part, then the base text.
    return text.split(VARIANT_SEPARATOR)[1:]


def decode_all(text: str) -> Dict[Optional[str], str]:
    """Return every variant of a text, indexed by modifier label.

    The base text is indexed by ``None``. A text that is not versioned
    decodes to ``{None: text}``.

    Raises:
        MalformedVersionSegmentError: If a variant segment is not exactly
            one non-empty label and one non-empty text.
    """
    if not is_versioned(text):
        return {None: text}

    base, *segments = _segments(text)
    decoded: Dict[Optional[str], str] = {None: base}
    for segment in segments:
        label, variant = _split_segment(segment)
        decoded[label] = variant
    return decoded


def decode_variant(text: str, label: Any) -> str:
    """Return the variant of a versioned text for an exact modifier label.

    Raises:
        NoMatchingVariantError: If the text is not versioned, or has no
            variant for the label.
        MalformedVersionSegmentError: If a segment before the match is
            malformed.
    """
    wanted = str(label)
    if is_versioned(text):
        for segment in _segments(text)[1:]:
            segment_label, variant = _split_segment(segment)
            if segment_label == wanted:
                return variant
    raise NoMatchingVariantError(
        f"This text has no version for modifier '{label}'.", modifier=label
    )


def base_text(text: str) -> str:
    """Return the base text of a versioned text, or the text itself.

    Example:
        >>> base_text(versioned("apples").one("apple").encode())
        'apples'
    """
    if is_versioned(text):
        return _segments(text)[0]
    return text


def plural_labels(n: int) -> Tuple[Optional[str], ...]:
    """Return the labels tried, in order, to pick the plural variant for n.

    ``None`` stands for the base text.
    """
    if n == 0:
        return (ZERO, MANY, None)
    if n == 1:
        return (ONE, None)
    if n in (2, 3, 4):
        return (str(n), TWO_THREE_FOUR, MANY, None)
    if n in (5, 6):
        return (str(n), MANY, None)
    if n == 10:
        return (TEN, MANY, None)
    return (str(n), MANY, None)


def select_plural_variant(n: int, decoded: Dict[Optional[str], str]) -> str:
    """Pick the plural variant for n and substitute ``%d`` with n.

    Args:
        n: Number of items.
        decoded: Variants as returned by ``decode_all()``.

    Returns:
        The chosen text, with every ``%d`` replaced by ``str(n)``.

    Raises:
        NoMatchingVariantError: If no label in the lookup chain has a text.
    """
    for label in plural_labels(n):
        text = decoded.get(label)
        if text is not None:
            return text.replace(PLURAL_PLACEHOLDER, str(n))
    raise NoMatchingVariantError(f"No version found (modifier: {n}).", modifier=n)


def prettify(text: str) -> str:
    """Render a versioned text on several lines, one per variant.

    Texts that are not versioned, or are malformed, are returned unchanged.
    """
    if not is_versioned(text):
        return text
    base, *segments = _segments(text)
    lines = [base]
    try:
        for segment in segments:
            label, variant = _split_segment(segment)
            lines.append(f"          {label} → {variant}")
    except MalformedVersionSegmentError:
        return text
    return "\n".join(lines)


@dataclass
class VersionedText:
    """Builder for a versioned text.

    Each modifier method appends a variant and returns the builder, so calls
    can be chained::

        versioned("%d items").zero("no items").one("one item").encode()

    Attributes:
        base: Unversioned text, returned when no variant applies.
        variants: Ordered (label, text) pairs.
    """

    base: str
    variants: List[Tuple[str, str]] = field(default_factory=list)

    @classmethod
    def parse(cls, text: str) -> "VersionedText":
        """Build from an encoded (or plain) text."""
        decoded = decode_all(text)
        base = decoded.pop(None)
        return cls(base=base, variants=list(decoded.items()))

    def modifier(self, label: Any, text: str) -> "VersionedText":
        self.variants.append((_check_variant(label, text), text))
        return self

    def zero(self, text: str) -> "VersionedText":
        """Plural modifier for zero elements."""
        return self.modifier(ZERO, text)

    def one(self, text: str) -> "VersionedText":
        """Plural modifier for 1 element."""
        return self.modifier(ONE, text)

    def two(self, text: str) -> "VersionedText":
        return self.modifier(TWO, text)

    def three(self, text: str) -> "VersionedText":
        return self.modifier(THREE, text)

    def four(self, text: str) -> "VersionedText":
        return self.modifier(FOUR, text)

    def five(self, text: str) -> "VersionedText":
        return self.modifier(FIVE, text)

    def six(self, text: str) -> "VersionedText":
        return self.modifier(SIX, text)

    def ten(self, text: str) -> "VersionedText":
        """Plural modifier for 10 elements."""
        return self.modifier(TEN, text)

    def times(self, number_of_times: int, text: str) -> "VersionedText":
        """Plural modifier for any number of elements, except 0, 1 and 2.

        Raises:
            InvalidFieldValueError: If number_of_times is 0, 1 or 2; use
                ``zero()``, ``one()`` or ``two()`` instead.
        """
        if 0 <= number_of_times <= 2:
            raise InvalidFieldValueError(
                f"times() needs a number below 0 or above 2, got {number_of_times}.",
                modifier=number_of_times,
            )
        return self.modifier(number_of_times, text)

    def two_three_four(self, text: str) -> "VersionedText":
        """Plural modifier for 2, 3 or 4 elements (as in Czech)."""
        return self.modifier(TWO_THREE_FOUR, text)

    def many(self, text: str) -> "VersionedText":
        """Plural modifier for any number of elements, except 1."""
        return self.modifier(MANY, text)

    def encode(self) -> str:
        if not self.variants:
            return self.base
        encoded = VARIANT_SEPARATOR + self.base
        for label, text in self.variants:
            encoded += f"{VARIANT_SEPARATOR}{label}{LABEL_SEPARATOR}{text}"
        return encoded

    def __str__(self) -> str:
        return self.encode()


def versioned(base: str, variants: Optional[Iterable[Tuple[Any, str]]] = None) -> VersionedText:
    """Start a versioned text from its base text."""
    builder = VersionedText(base=base)
    for label, text in variants or ():
        builder.modifier(label, text)
    return builder
