"""Package type detection."""

from wppkg.detection.registry import (
    DetectionRule,
    FileMatcher,
    PackageTypeDetector,
    ParseFunc,
    build_default_detector,
)

__all__ = [
    "DetectionRule",
    "FileMatcher",
    "PackageTypeDetector",
    "ParseFunc",
    "build_default_detector",
]
