"""Thumbnail downloader: derive thumbnail URLs from video links."""

from features.thumbnail_downloader.urls import ThumbnailLink, extract_video_id, thumbnail_links

__all__ = ["ThumbnailLink", "extract_video_id", "thumbnail_links"]
