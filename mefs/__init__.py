"""Bucket location cache, bucket notification configuration, hooked readers, size helpers and limits for an S3-compatible storage client."""

__version__ = "0.1.0"
__all__ = ["bucket_cache", "constants", "hook_reader", "notification", "sizes"]