"""Custom exceptions for the nucleoscope package."""


class NucleoscopeError(Exception):
    """Base exception class for nucleoscope."""
    pass


class FileReadError(NucleoscopeError, IOError):
    """Raised when an input file cannot be opened, decompressed or queried."""
    pass


class MalformedRecordError(NucleoscopeError):
    """Raised when a GTF line does not follow the GENCODE layout."""
    pass


class MalformedStrandError(MalformedRecordError):
    """Raised when the strand column is neither '+' nor '-'."""
    pass


class AttributeMissingError(MalformedRecordError):
    """Raised when a GTF line lacks a gene_id or transcript_id attribute."""
    pass


class UnexpectedFastaCountError(NucleoscopeError):
    """Raised when a FASTA file does not hold exactly one record."""
    pass


class WindowOutOfBoundsError(NucleoscopeError):
    """Raised when a promoter window would extend past the chromosome ends."""
    pass
