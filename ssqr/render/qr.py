import base64
import io
import qrcode
from dataclasses import dataclass
from typing import Optional
from PIL import Image
from qrcode.exceptions import DataOverflowError
from ssqr.core.config import settings

ROTATE_CLASS = "rotate"

# Highest first; long snippets step down until they fit a version 40 symbol
ERROR_CORRECTION_LEVELS = (
    qrcode.constants.ERROR_CORRECT_H,
    qrcode.constants.ERROR_CORRECT_Q,
    qrcode.constants.ERROR_CORRECT_M,
    qrcode.constants.ERROR_CORRECT_L,
)

@dataclass
class CodeRegion:
    element_id: str = "qrcodeImg"
    width: int = 300
    height: int = 300
    text: Optional[str] = None
    png: Optional[bytes] = None
    rotated: bool = False
    render_count: int = 0

    @property
    def data_uri(self) -> Optional[str]:
        if self.png is None:
            return None
        return "data:image/png;base64," + base64.b64encode(self.png).decode("ascii")

    @property
    def css_class(self) -> str:
        return ROTATE_CLASS if self.rotated else ""

class CodeRenderer:
    """
    QR code widget bound to one page region.

    ``make_code`` replaces the encoded image in place and flips the region's
    rotation toggle, which the page stylesheet turns into a one-shot spin.
    """

    def __init__(self, region: CodeRegion, width: Optional[int] = None, height: Optional[int] = None):
        self.region = region
        self.width = width or settings.QR_WIDTH
        self.height = height or settings.QR_HEIGHT
        region.width = self.width
        region.height = self.height

    def encode(self, text: str) -> bytes:
        """
        Encode ``text`` as a PNG of exactly ``width`` x ``height`` pixels.
        Raises DataOverflowError when the text does not fit even at the lowest error correction.
        """
        for level in ERROR_CORRECTION_LEVELS:
            qr = qrcode.QRCode(version=None, error_correction=level, box_size=10, border=0)
            qr.add_data(text)
            try:
                qr.make(fit=True)
            except (DataOverflowError, ValueError):
                # fit=True reports overflow as an invalid version 41
                continue

            img = qr.make_image(fill_color="black", back_color="white").get_image()
            img = img.convert("RGB").resize((self.width, self.height), Image.Resampling.NEAREST)

            buf = io.BytesIO()
            img.save(buf, "PNG")
            return buf.getvalue()

        raise DataOverflowError(f"{len(text)} chars do not fit in a QR code")

    def make_code(self, text: str) -> CodeRegion:
        try:
            png = self.encode(text)
        except DataOverflowError as e:
            print(f"RENDER FALLBACK: {e}")
            text = settings.FALLBACK_TEXT
            png = self.encode(text)

        self.region.png = png
        self.region.text = text
        self.region.render_count += 1
        self.toggle_rotation()
        print(f"RENDERED {len(text)} chars into #{self.region.element_id}")
        return self.region

    def toggle_rotation(self) -> bool:
        self.region.rotated = not self.region.rotated
        return self.region.rotated
