"""Signature building: grouping codes by the exact set of files containing them.

A signature is stored as a tuple of indices into the ascending-sorted file
name list, so grouping and ordering never round-trip through joined strings.
Index order equals name order, so a signature's names are always ascending.
"""

from __future__ import annotations

from typing import Iterator, Mapping, Sequence

from codesets.constants import FILE_WARNING_THRESHOLD
from codesets.types import FileCodeSet
from codesets.utils.logger import logger

Signature = tuple[int, ...]


class SignatureBuckets:
    """Codes grouped by signature.

    Each code lives in exactly one bucket: the one keyed by the full set of
    files that contain it.
    """

    def __init__(self, file_names: Sequence[str]) -> None:
        self._file_names = tuple(sorted(file_names))
        self._buckets: dict[Signature, set[str]] = {}

    @property
    def file_names(self) -> tuple[str, ...]:
        """All compared file names, ascending."""
        return self._file_names

    def add(self, signature: Signature, code: str) -> None:
        """Insert a code into the bucket for a signature, creating it on first use."""
        self._buckets.setdefault(signature, set()).add(code)

    def names(self, signature: Signature) -> tuple[str, ...]:
        """Resolve a signature to its file names (ascending)."""
        return tuple(self._file_names[i] for i in signature)

    def sort_key(self, signature: Signature) -> tuple[int, str]:
        """Report order: more files first, then comma-joined names ascending."""
        return (-len(signature), ",".join(self.names(signature)))

    def items(self) -> Iterator[tuple[Signature, frozenset[str]]]:
        for signature, codes in self._buckets.items():
            yield signature, frozenset(codes)

    def ordered(self) -> list[tuple[Signature, frozenset[str]]]:
        """Buckets in report order."""
        return sorted(self.items(), key=lambda item: self.sort_key(item[0]))

    def all_codes(self) -> set[str]:
        result: set[str] = set()
        for codes in self._buckets.values():
            result.update(codes)
        return result

    def __len__(self) -> int:
        return len(self._buckets)

    def __contains__(self, signature: object) -> bool:
        return signature in self._buckets


class SignatureBuilder:
    """Computes signature buckets from per-file code sets.

    For every code in the union of all sets, the sorted file list is scanned
    and the indices of the files containing the code form its signature.
    This costs O(unique codes x files); above ``file_warning_threshold``
    files a warning is logged since up to 2**n - 1 signatures are possible.

    Usage:
        buckets = SignatureBuilder().build({"a": set_a, "b": set_b})
        for signature, codes in buckets.ordered():
            print(buckets.names(signature), sorted(codes))
    """

    def __init__(self, file_warning_threshold: int = FILE_WARNING_THRESHOLD) -> None:
        self._file_warning_threshold = file_warning_threshold

    def build(self, file_code_sets: Mapping[str, FileCodeSet]) -> SignatureBuckets:
        """Group every code by the exact set of files containing it.

        Args:
            file_code_sets: File name to that file's code set. Files with
                empty sets take part but never appear in a signature.

        Returns:
            SignatureBuckets over all file names.
        """
        buckets = SignatureBuckets(file_code_sets.keys())
        file_names = buckets.file_names

        if len(file_names) > self._file_warning_threshold:
            logger.warning(
                f"Comparing {len(file_names)} files (threshold {self._file_warning_threshold}); "
                f"up to {2 ** len(file_names) - 1} signatures are possible and "
                "every code is checked against every file"
            )

        all_codes: set[str] = set()
        for code_set in file_code_sets.values():
            all_codes.update(code_set.codes)

        ordered_sets = [file_code_sets[name] for name in file_names]
        for code in sorted(all_codes):
            signature = tuple(i for i, code_set in enumerate(ordered_sets) if code in code_set)
            buckets.add(signature, code)

        logger.debug(
            f"Grouped {len(all_codes)} codes from {len(file_names)} files "
            f"into {len(buckets)} signatures"
        )
        return buckets
