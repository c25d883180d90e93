"""Tests for media classification."""

from __future__ import annotations

import pytest

from mimeresolver.media import classify, instance


class TestClassify:
    def test_image_jpeg(self) -> None:
        assert classify("image/jpeg") == "image"

    def test_audio_mp3(self) -> None:
        assert classify("audio/mpeg") == "audio"

    def test_video_mp4(self) -> None:
        assert classify("video/mp4") == "video"

    def test_text_plain(self) -> None:
        assert classify("text/plain") == "text"

    @pytest.mark.parametrize(
        "content_type",
        ["application/json", "application/xml", "application/ld+json", "image/svg+xml", "application/atom+xml"],
    )
    def test_textual_application_types(self, content_type: str) -> None:
        expected = "image" if content_type.startswith("image/") else "text"
        assert classify(content_type) == expected

    def test_binary_application(self) -> None:
        assert classify("application/pdf") == "file"
        assert classify("application/octet-stream") == "file"

    def test_case_insensitive(self) -> None:
        assert classify("IMAGE/JPEG") == "image"

    def test_content_type_with_params(self) -> None:
        assert classify("text/html; charset=utf-8") == "text"

    def test_empty_string(self) -> None:
        assert classify("") == "file"

    def test_missing_subtype(self) -> None:
        assert classify("image") == "file"
        assert classify("image/") == "file"

    def test_from_resolved_filename(self) -> None:
        assert classify(instance().mimetype("clip.MKV")) == "video"
        assert classify(instance().mimetype("unknown.bin")) == "file"
