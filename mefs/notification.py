"""Bucket notification configuration and its XML form."""

from __future__ import annotations

import enum
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import Union


class NotificationEventType(str, enum.Enum):
    """S3 event types a bucket notification can subscribe to."""

    OBJECT_CREATED_ALL = "s3:ObjectCreated:*"
    OBJECT_CREATED_PUT = "s3:ObjectCreated:Put"
    OBJECT_CREATED_POST = "s3:ObjectCreated:Post"
    OBJECT_CREATED_COPY = "s3:ObjectCreated:Copy"
    OBJECT_CREATED_COMPLETE_MULTIPART_UPLOAD = "s3:ObjectCreated:CompleteMultipartUpload"
    OBJECT_ACCESSED_GET = "s3:ObjectAccessed:Get"
    OBJECT_ACCESSED_HEAD = "s3:ObjectAccessed:Head"
    OBJECT_ACCESSED_ALL = "s3:ObjectAccessed:*"
    OBJECT_REMOVED_ALL = "s3:ObjectRemoved:*"
    OBJECT_REMOVED_DELETE = "s3:ObjectRemoved:Delete"
    OBJECT_REMOVED_DELETE_MARKER_CREATED = "s3:ObjectRemoved:DeleteMarkerCreated"
    OBJECT_REDUCED_REDUNDANCY_LOST_OBJECT = "s3:ReducedRedundancyLostObject"


Event = Union[NotificationEventType, str]


@dataclass
class FilterRule:
    """A single prefix or suffix rule."""

    name: str
    value: str


@dataclass
class S3Key:
    """Holds the filter rules of a notification filter."""

    filter_rules: list[FilterRule] = field(default_factory=list)


@dataclass
class Filter:
    """Prefix/suffix filters of a notification configuration."""

    s3_key: S3Key = field(default_factory=S3Key)


@dataclass(frozen=True)
class Arn:
    """Amazon resource name of a notification target."""

    partition: str = ""
    service: str = ""
    region: str = ""
    account_id: str = ""
    resource: str = ""

    def __str__(self) -> str:
        return ":".join(
            ("arn", self.partition, self.service, self.region, self.account_id, self.resource)
        )


@dataclass
class NotificationConfig:
    """One topic, queue or lambda notification configuration."""

    arn: Arn = field(default_factory=Arn)
    id: str = ""
    events: list[Event] = field(default_factory=list)
    filter: Filter | None = field(default_factory=Filter)

    def add_events(self, *events: Event) -> None:
        """Append events to the configuration."""
        self.events.extend(events)

    def _set_rule(self, name: str, value: str) -> None:
        if self.filter is None:
            self.filter = Filter()
        rules = self.filter.s3_key.filter_rules
        new_rule = FilterRule(name=name, value=value)
        for position, rule in enumerate(rules):
            if rule.name == name:
                rules[position] = new_rule
                return
        rules.append(new_rule)

    def add_filter_suffix(self, suffix: str) -> None:
        """Set the suffix filter, replacing any existing one."""
        self._set_rule("suffix", suffix)

    def add_filter_prefix(self, prefix: str) -> None:
        """Set the prefix filter, replacing any existing one."""
        self._set_rule("prefix", prefix)


@dataclass
class TopicConfig(NotificationConfig):
    """A topic notification configuration."""

    topic: str = ""


@dataclass
class QueueConfig(NotificationConfig):
    """A queue notification configuration."""

    queue: str = ""


@dataclass
class LambdaConfig(NotificationConfig):
    """A cloud function notification configuration."""

    cloud_function: str = ""


_TARGETS = (
    ("lambda_configs", "CloudFunctionConfiguration", LambdaConfig, "cloud_function", "CloudFunction"),
    ("topic_configs", "TopicConfiguration", TopicConfig, "topic", "Topic"),
    ("queue_configs", "QueueConfiguration", QueueConfig, "queue", "Queue"),
)


def _event_text(event: Event) -> str:
    return event.value if isinstance(event, NotificationEventType) else event


@dataclass
class BucketNotification:
    """The whole notification configuration of a bucket."""

    lambda_configs: list[LambdaConfig] = field(default_factory=list)
    topic_configs: list[TopicConfig] = field(default_factory=list)
    queue_configs: list[QueueConfig] = field(default_factory=list)

    @staticmethod
    def _add(configs: list, cls: type, target_field: str, config: NotificationConfig) -> bool:
        target = str(config.arn)
        new_events = set(config.events)
        for existing in configs:
            if (
                getattr(existing, target_field) == target
                and existing.filter is config.filter
                and new_events & set(existing.events)
            ):
                return False
        configs.append(
            cls(
                arn=config.arn,
                id=config.id,
                events=list(config.events),
                filter=config.filter,
                **{target_field: target},
            )
        )
        return True

    def add_topic(self, config: NotificationConfig) -> bool:
        """Add a topic configuration; False if it clashes with an existing one."""
        return self._add(self.topic_configs, TopicConfig, "topic", config)

    def add_queue(self, config: NotificationConfig) -> bool:
        """Add a queue configuration; False if it clashes with an existing one."""
        return self._add(self.queue_configs, QueueConfig, "queue", config)

    def add_lambda(self, config: NotificationConfig) -> bool:
        """Add a lambda configuration; False if it clashes with an existing one."""
        return self._add(self.lambda_configs, LambdaConfig, "cloud_function", config)

    def remove_topic_by_arn(self, arn: Arn) -> None:
        """Remove every topic configuration targeting exactly this ARN."""
        target = str(arn)
        self.topic_configs = [c for c in self.topic_configs if c.topic != target]

    def remove_queue_by_arn(self, arn: Arn) -> None:
        """Remove every queue configuration targeting exactly this ARN."""
        target = str(arn)
        self.queue_configs = [c for c in self.queue_configs if c.queue != target]

    def remove_lambda_by_arn(self, arn: Arn) -> None:
        """Remove every lambda configuration targeting exactly this ARN."""
        target = str(arn)
        self.lambda_configs = [c for c in self.lambda_configs if c.cloud_function != target]

    def to_xml(self) -> bytes:
        """Serialise to the NotificationConfiguration XML document."""
        root = ET.Element("NotificationConfiguration")
        for attr, tag, _cls, target_field, target_tag in _TARGETS:
            for config in getattr(self, attr):
                element = ET.SubElement(root, tag)
                if config.id:
                    ET.SubElement(element, "Id").text = config.id
                for event in config.events:
                    ET.SubElement(element, "Event").text = _event_text(event)
                if config.filter is not None:
                    filter_el = ET.SubElement(element, "Filter")
                    key_el = ET.SubElement(filter_el, "S3Key")
                    for rule in config.filter.s3_key.filter_rules:
                        rule_el = ET.SubElement(key_el, "FilterRule")
                        ET.SubElement(rule_el, "Name").text = rule.name
                        ET.SubElement(rule_el, "Value").text = rule.value
                ET.SubElement(element, target_tag).text = getattr(config, target_field)
        return ET.tostring(root, encoding="unicode", short_empty_elements=False).encode("utf-8")


def _local(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _children(element: ET.Element, name: str) -> list[ET.Element]:
    return [child for child in element if _local(child.tag) == name]


def _child_text(element: ET.Element, name: str) -> str:
    found = _children(element, name)
    return (found[0].text or "") if found else ""


def _parse_event(text: str) -> Event:
    try:
        return NotificationEventType(text)
    except ValueError:
        return text


def _parse_arn(text: str) -> Arn:
    parts = text.split(":", 5)
    if len(parts) == 6 and parts[0] == "arn":
        return Arn(*parts[1:])
    return Arn()


def _parse_filter(element: ET.Element) -> Filter | None:
    found = _children(element, "Filter")
    if not found:
        return None
    rules = [
        FilterRule(name=_child_text(rule, "Name"), value=_child_text(rule, "Value"))
        for key in _children(found[0], "S3Key")
        for rule in _children(key, "FilterRule")
    ]
    return Filter(s3_key=S3Key(filter_rules=rules))


def parse_bucket_notification(data: bytes | str) -> BucketNotification:
    """Parse a NotificationConfiguration XML document."""
    root = ET.fromstring(data)
    if _local(root.tag) != "NotificationConfiguration":
        raise ValueError(f"unexpected root element {_local(root.tag)!r}")
    notification = BucketNotification()
    for attr, tag, cls, target_field, target_tag in _TARGETS:
        configs = getattr(notification, attr)
        for element in _children(root, tag):
            target = _child_text(element, target_tag)
            configs.append(
                cls(
                    arn=_parse_arn(target),
                    id=_child_text(element, "Id"),
                    events=[_parse_event(e.text or "") for e in _children(element, "Event")],
                    filter=_parse_filter(element),
                    **{target_field: target},
                )
            )
    return notification