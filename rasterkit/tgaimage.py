"""Truevision TGA images: colours, pixel access, reading and writing."""

from __future__ import annotations

import enum
import struct
from dataclasses import dataclass
from os import PathLike
from typing import Iterator, Union

_HEADER = struct.Struct("<BBBhhBhhhhBB")
_FOOTER = bytes(8) + b"TRUEVISION-XFILE.\0"
_MAX_CHUNK_LENGTH = 128
_TOP_LEFT_ORIGIN = 0x20
_RIGHT_TO_LEFT = 0x10

PathType = Union[str, "PathLike[str]"]


class TGAError(Exception):
    """Raised when a TGA file cannot be read or written."""


class ImageFormat(enum.IntEnum):
    """Bytes per pixel of the supported pixel layouts."""

    GRAYSCALE = 1
    RGB = 3
    RGBA = 4


@dataclass(frozen=True)
class TGAColor:
    """A pixel colour; channels are stored as bytes in B, G, R, A order."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 0
    bytespp: int = 4

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            object.__setattr__(self, name, int(getattr(self, name)) & 0xFF)

    @classmethod
    def from_bytes(cls, data: bytes, bytespp: int) -> "TGAColor":
        """Build a colour from the first ``bytespp`` bytes of ``data``."""
        b, g, r, a = bytes(data[:bytespp]).ljust(4, b"\0")[:4]
        return cls(r, g, b, a, bytespp)

    @property
    def raw(self) -> bytes:
        """All four channel bytes in storage order."""
        return bytes((self.b, self.g, self.r, self.a))

    def to_bytes(self) -> bytes:
        """The colour's own ``bytespp`` bytes in storage order."""
        return self.raw[: self.bytespp]


def _check_format(bytespp: int) -> None:
    try:
        ImageFormat(bytespp)
    except ValueError:
        raise TGAError("bad bpp (or width/height) value") from None


def _decode_rle(payload: memoryview, pixelcount: int, bytespp: int) -> bytearray:
    out = bytearray()
    pos = 0
    pixels = 0
    while pixels < pixelcount:
        if pos >= len(payload):
            raise TGAError("an error occurred while reading the data")
        chunk_header = payload[pos]
        pos += 1
        if chunk_header < 128:
            count = chunk_header + 1
            size = count * bytespp
            chunk = bytes(payload[pos : pos + size])
            if len(chunk) < size:
                raise TGAError("an error occurred while reading the data")
            pos += size
        else:
            count = chunk_header - 127
            pixel = bytes(payload[pos : pos + bytespp])
            if len(pixel) < bytespp:
                raise TGAError("an error occurred while reading the data")
            pos += bytespp
            chunk = pixel * count
        pixels += count
        if pixels > pixelcount:
            raise TGAError("too many pixels read")
        out += chunk
    return out


class TGAImage:
    """A width x height raster of pixels, ``bytespp`` bytes each."""

    def __init__(self, width: int = 0, height: int = 0, bytespp: int = 0) -> None:
        if width < 0 or height < 0 or bytespp < 0:
            raise ValueError("image dimensions must not be negative")
        self.width = width
        self.height = height
        self.bytespp = bytespp
        self.data = bytearray(width * height * bytespp)

    def __repr__(self) -> str:
        return f"TGAImage({self.width}x{self.height}/{self.bytespp * 8})"

    @classmethod
    def read_tga_file(cls, filename: PathType) -> "TGAImage":
        """Load an uncompressed or RLE-compressed TGA file."""
        try:
            with open(filename, "rb") as handle:
                content = handle.read()
        except OSError as exc:
            raise TGAError(f"can't open file {filename}") from exc
        return cls._decode(content)

    @classmethod
    def _decode(cls, content: bytes) -> "TGAImage":
        if len(content) < _HEADER.size:
            raise TGAError("an error occurred while reading the header")
        fields = _HEADER.unpack_from(content)
        datatype = fields[2]
        width, height, bits, descriptor = fields[8:12]
        bytespp = bits >> 3
        if width <= 0 or height <= 0:
            raise TGAError("bad bpp (or width/height) value")
        _check_format(bytespp)

        image = cls(width, height, bytespp)
        payload = memoryview(content)[_HEADER.size :]
        if datatype in (2, 3):
            nbytes = len(image.data)
            if len(payload) < nbytes:
                raise TGAError("an error occurred while reading the data")
            image.data[:] = payload[:nbytes]
        elif datatype in (10, 11):
            image.data[:] = _decode_rle(payload, width * height, bytespp)
        else:
            raise TGAError(f"unknown file format {datatype}")

        if not descriptor & _TOP_LEFT_ORIGIN:
            image.flip_vertically()
        if descriptor & _RIGHT_TO_LEFT:
            image.flip_horizontally()
        return image

    def write_tga_file(self, filename: PathType, rle: bool = True) -> None:
        """Write the image with a top-left origin, RLE-compressed by default."""
        if self.bytespp == ImageFormat.GRAYSCALE:
            datatype = 11 if rle else 3
        else:
            datatype = 10 if rle else 2
        header = _HEADER.pack(
            0, 0, datatype, 0, 0, 0, 0, 0,
            self.width, self.height, self.bytespp << 3, _TOP_LEFT_ORIGIN,
        )
        body = b"".join(self._rle_chunks()) if rle else bytes(self.data)
        try:
            with open(filename, "wb") as handle:
                handle.write(header + body + _FOOTER)
        except OSError as exc:
            raise TGAError(f"can't open file {filename}") from exc

    def _pixel_bytes(self, index: int) -> bytes:
        start = index * self.bytespp
        return bytes(self.data[start : start + self.bytespp])

    def _rle_chunks(self) -> Iterator[bytes]:
        npixels = self.width * self.height
        curpix = 0
        while curpix < npixels:
            run_length = 1
            raw = True
            while curpix + run_length < npixels and run_length < _MAX_CHUNK_LENGTH:
                same = (
                    self._pixel_bytes(curpix + run_length - 1)
                    == self._pixel_bytes(curpix + run_length)
                )
                if run_length == 1:
                    raw = not same
                if raw and same:
                    run_length -= 1
                    break
                if not raw and not same:
                    break
                run_length += 1
            if raw:
                start = curpix * self.bytespp
                end = (curpix + run_length) * self.bytespp
                yield bytes([run_length - 1]) + bytes(self.data[start:end])
            else:
                yield bytes([run_length + 127]) + self._pixel_bytes(curpix)
            curpix += run_length

    def _contains(self, x: int, y: int) -> bool:
        return bool(self.data) and 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> TGAColor:
        """Colour at (x, y); a blank one-byte colour outside the image."""
        if not self._contains(x, y):
            return TGAColor(bytespp=1)
        start = (x + y * self.width) * self.bytespp
        return TGAColor.from_bytes(self.data[start : start + self.bytespp], self.bytespp)

    def set(self, x: int, y: int, color: TGAColor) -> bool:
        """Store a colour at (x, y); returns False when the point lies outside."""
        if not self._contains(x, y):
            return False
        start = (x + y * self.width) * self.bytespp
        self.data[start : start + self.bytespp] = color.raw[: self.bytespp]
        return True

    def _rows(self) -> list[bytes]:
        stride = self.width * self.bytespp
        if not stride:
            return []
        return [bytes(self.data[i : i + stride]) for i in range(0, len(self.data), stride)]

    def _split_pixels(self, row: bytes) -> list[bytes]:
        bpp = self.bytespp
        return [row[i : i + bpp] for i in range(0, len(row), bpp)]

    def flip_horizontally(self) -> None:
        """Mirror the image left to right."""
        self.data[:] = b"".join(
            b"".join(reversed(self._split_pixels(row))) for row in self._rows()
        )

    def flip_vertically(self) -> None:
        """Mirror the image top to bottom."""
        self.data[:] = b"".join(reversed(self._rows()))

    def scale(self, w: int, h: int) -> None:
        """Resize to w x h by nearest-pixel error diffusion."""
        if w <= 0 or h <= 0:
            raise ValueError("target size must be positive")
        if not self.data:
            raise ValueError("cannot scale an empty image")
        line_bytes = w * self.bytespp
        new_rows: list[bytes] = []
        erry = 0
        for row in self._rows():
            line = bytearray()
            errx = self.width - w
            for pixel in self._split_pixels(row):
                errx += w
                if errx >= self.width:
                    repeat = errx // self.width
                    errx -= repeat * self.width
                    line += pixel * repeat
            padded = bytes(line.ljust(line_bytes, b"\0"))
            erry += h
            repeat = erry // self.height
            erry -= repeat * self.height
            new_rows.extend([padded] * repeat)
        self.data = bytearray(b"".join(new_rows).ljust(w * h * self.bytespp, b"\0"))
        self.width = w
        self.height = h

    def buffer(self) -> bytearray:
        """The raw pixel bytes, row by row from the top."""
        return self.data

    def clear(self) -> None:
        """Set every byte of the image to zero."""
        self.data[:] = bytes(len(self.data))