import piexif
import piexif.helper
import pytest
from PIL import Image


GPS_IFD = {
    piexif.GPSIFD.GPSVersionID: (2, 2, 0, 0),
    piexif.GPSIFD.GPSLatitudeRef: b"S",
    piexif.GPSIFD.GPSLatitude: ((40, 1), (26, 1), (46, 1)),
    piexif.GPSIFD.GPSLongitudeRef: b"W",
    piexif.GPSIFD.GPSLongitude: ((79, 1), (58, 1), (56, 1)),
}


def sample_exif(with_gps: bool = True) -> dict:
    exif = {
        "0th": {
            piexif.ImageIFD.Make: b"Canon",
            piexif.ImageIFD.Model: b"Canon EOS 5D",
            piexif.ImageIFD.Orientation: 1,
            piexif.ImageIFD.XResolution: (72, 1),
        },
        "Exif": {
            piexif.ExifIFD.ExposureTime: (1, 250),
            piexif.ExifIFD.ISOSpeedRatings: 100,
            piexif.ExifIFD.ExposureBiasValue: (-1, 3),
            piexif.ExifIFD.UserComment: piexif.helper.UserComment.dump("hello"),
        },
    }
    if with_gps:
        exif["GPS"] = dict(GPS_IFD)
    return exif


@pytest.fixture
def make_jpeg(tmp_path):
    def _make(exif: dict | None = None, name: str = "photo.jpg") -> str:
        path = tmp_path / name
        image = Image.new("RGB", (8, 8), (128, 64, 32))
        if exif is None:
            image.save(path, format="jpeg")
        else:
            image.save(path, format="jpeg", exif=piexif.dump(exif))
        return str(path)

    return _make


@pytest.fixture
def gps_jpeg(make_jpeg):
    return make_jpeg(sample_exif())
