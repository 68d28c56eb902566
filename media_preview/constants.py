NOMEDIA_MARKER = ".nomedia"
ALBUM_CAP = 4

IMAGE_MEDIA_TYPES = {
    "image/jpeg",
    "image/png",
    "image/gif",
    "image/webp",
    "image/bmp",
    "image/tiff",
    "image/heic",
    "image/heif",
    "image/x-xbitmap",
}
VIDEO_MEDIA_TYPES = {"video/mp4", "video/quicktime", "video/x-matroska", "video/x-msvideo", "video/x-m4v"}
SVG_MEDIA_TYPE = "image/svg+xml"
DEFAULT_MEDIA_TYPES = IMAGE_MEDIA_TYPES

FALLBACK_MIME_TYPE = "application/octet-stream"
MIME_TYPE_OVERRIDES = {
    ".heic": "image/heic",
    ".heif": "image/heif",
    ".webp": "image/webp",
    ".mkv": "video/x-matroska",
    ".m4v": "video/x-m4v",
}
