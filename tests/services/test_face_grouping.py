"""Tests for the image grouping service."""
from typing import Dict, List

import pytest

from facematch.core.exceptions import DimensionMismatchError, NoDescriptorFoundError
from facematch.domain.entities.descriptor import Descriptor
from facematch.domain.interfaces.recognition.descriptor_extractor import DescriptorExtractor
from facematch.services.face_grouping import FaceGroupingService


class FakeExtractor(DescriptorExtractor):
    """Returns canned descriptors keyed by the image bytes."""

    def __init__(self, faces: Dict[bytes, List[Descriptor]]):
        self.faces = faces
        self.calls: List[bytes] = []

    async def extract(self, image_bytes: bytes) -> List[Descriptor]:
        self.calls.append(image_bytes)
        faces = self.faces.get(image_bytes)
        if faces is None:
            raise NoDescriptorFoundError("No faces detected in image")
        return faces


@pytest.fixture
def extractor(axis, origin):
    return FakeExtractor({
        b"group-photo": [origin, axis(1, 2.0)],
        b"portrait": [axis(0, 0.3)],
        b"landscape": [],
    })


class TestFaceGroupingService:
    @pytest.mark.asyncio
    async def test_groups_faces_across_images(self, extractor):
        service = FaceGroupingService(extractor)
        clusters = await service.group_images(
            {"a.jpg": b"group-photo", "b.jpg": b"portrait"},
            threshold=0.6,
        )
        assert [c.source_ids for c in clusters] == [["a.jpg", "b.jpg"], ["a.jpg"]]

    @pytest.mark.asyncio
    async def test_images_processed_in_order(self, extractor):
        service = FaceGroupingService(extractor)
        await service.group_images({"b": b"portrait", "a": b"group-photo"}, threshold=0.6)
        assert extractor.calls == [b"portrait", b"group-photo"]

    @pytest.mark.asyncio
    async def test_images_without_faces_are_skipped(self, extractor):
        service = FaceGroupingService(extractor)
        clusters = await service.group_images(
            {"empty": b"landscape", "missing": b"unknown", "p": b"portrait"},
            threshold=0.6,
        )
        assert [c.source_ids for c in clusters] == [["p"]]

    @pytest.mark.asyncio
    async def test_progress_reported_per_image(self, extractor):
        progress: List[int] = []
        service = FaceGroupingService(extractor)
        await service.group_images(
            {"a": b"group-photo", "b": b"portrait", "c": b"landscape"},
            threshold=0.6,
            on_progress=progress.append,
        )
        assert progress == [33, 67, 100]

    @pytest.mark.asyncio
    async def test_default_threshold_from_settings(self, extractor):
        service = FaceGroupingService(extractor)
        clusters = await service.group_images({"a": b"group-photo", "b": b"portrait"})
        assert len(clusters) == 2

    @pytest.mark.asyncio
    async def test_no_images(self, extractor):
        service = FaceGroupingService(extractor)
        assert await service.group_images({}, threshold=0.6) == []

    @pytest.mark.asyncio
    async def test_mixed_dimensions_rejected(self, origin):
        service = FaceGroupingService(FakeExtractor({
            b"x": [origin],
            b"y": [Descriptor([0.0] * 8)],
        }))
        with pytest.raises(DimensionMismatchError):
            await service.group_images({"x": b"x", "y": b"y"}, threshold=0.6)
