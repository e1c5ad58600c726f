# mefs

Small building blocks for an S3-compatible object storage client. It uses
only the standard library.

## What is inside

- `mefs.bucket_cache.BucketLocationCache`: a thread-safe in-memory map from
  bucket names to their regions. `get()` returns the location or `None`,
  `set()` stores one, `delete()` forgets a bucket (unknown names are
  ignored), and `name in cache` tests for an entry.
- `mefs.notification`: bucket notification configuration.
  - `NotificationEventType` lists the S3 event types
    (`s3:ObjectCreated:*`, `s3:ObjectRemoved:Delete`, ...).
  - `Arn` builds an ARN; `str(arn)` gives
    `arn:<partition>:<service>:<region>:<account_id>:<resource>`.
  - `NotificationConfig` holds an ARN, an id, events and a `Filter`.
    `add_events()` appends events; `add_filter_prefix()` and
    `add_filter_suffix()` set the prefix or suffix rule, replacing an
    existing rule of the same name.
  - `BucketNotification` collects `TopicConfig`, `QueueConfig` and
    `LambdaConfig` entries. `add_topic()`, `add_queue()` and
    `add_lambda()` return `False` and add nothing when an existing entry
    has the same target ARN, the same filter object and shares an event.
    `remove_topic_by_arn()`, `remove_queue_by_arn()` and
    `remove_lambda_by_arn()` drop every entry for an ARN. `to_xml()`
    returns the `NotificationConfiguration` document as UTF-8 bytes.
  - `parse_bucket_notification()` reads such a document back and raises
    `ValueError` if the root element is something else.
- `mefs.hook_reader`: `new_hook(source, hook)` wraps a readable object so
  that every chunk read from it is also passed to `hook.read(chunk)`,
  which is handy for progress reporting. With `hook=None` the source is
  returned unchanged. `HookReader.seek()` seeks the source and, if it can
  seek, the hook too, raising `ValueError` when they land on different
  offsets.
- `mefs.sizes`: `to_storage_size()` formats a byte count as `B`, `KB`,
  `MB` or `GB` with two decimals; `fill_random(buffer, rng)` fills a
  `bytearray` in place from a `random.Random`, seven bytes per 63-bit draw.
- `mefs.constants`: multipart upload limits (part sizes, part count,
  object sizes), the number of parallel workers, the signature algorithm
  name and date format, and header names.

## What it does not do

There is no client here: the package sends no requests, signs nothing and
does not talk to a server. It provides the pieces such a client would use
(the cache, the notification document, the hooked reader, the limits),
but fetching bucket locations, uploading or downloading objects and
applying notification settings are left to the caller.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from mefs.notification import (
    Arn,
    BucketNotification,
    NotificationConfig,
    NotificationEventType,
    parse_bucket_notification,
)

arn = Arn("aws", "sns", "us-east-1", "000000000000", "uploads")
config = NotificationConfig(arn)
config.add_events(NotificationEventType.OBJECT_CREATED_ALL)
config.add_filter_prefix("photos/")
config.add_filter_suffix(".jpg")

notification = BucketNotification()
notification.add_topic(config)
document = notification.to_xml()

again = parse_bucket_notification(document)
print(again.topic_configs[0].topic)  # arn:aws:sns:us-east-1:000000000000:uploads
```

```python
import io

from mefs.hook_reader import new_hook


class Progress:
    def __init__(self):
        self.total = 0

    def read(self, chunk):
        self.total += len(chunk)


progress = Progress()
reader = new_hook(io.BytesIO(b"hello world"), progress)
reader.read(5)
print(progress.total)  # 5
```

```python
from mefs.sizes import to_storage_size

print(to_storage_size(1536))  # 1.50KB
```