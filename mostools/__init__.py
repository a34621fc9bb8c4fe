"""Host-side build tools for a small teaching kernel: ELF parsing, readelf, bintoc and formatting."""

__version__ = "0.1.0"
__all__ = ["args", "bintoc", "bits", "elf", "errors", "fmt", "readelf"]