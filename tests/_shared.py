ZIP_BYTES = bytes([0x50, 0x4B, 0x03, 0x04]) + b"dummy"
PNG_BYTES = bytes([0x89, 0x50, 0x4E, 0x47, 0x0D, 0x0A, 0x1A, 0x0A]) + b"dummy"
JPEG_BYTES = bytes([0xFF, 0xD8, 0xFF, 0xE0]) + b"dummy"
