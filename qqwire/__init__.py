"""TEA cipher, byte readers and writers, compression helpers and JCE serialisation for the QQ protocol."""

__version__ = "0.1.0"