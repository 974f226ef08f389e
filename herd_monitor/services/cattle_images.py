"""
Deterministic image assignment for cattle cards.
"""
from typing import Dict, Tuple

BREED_IMAGES: Dict[str, Tuple[str, ...]] = {
    "Holstein Friesian": ("/images/cow1.jpg", "/images/cow2.jpg"),
    "Holstein": ("/images/cow1.jpg", "/images/cow2.jpg"),
    "Jersey": ("/images/cow3.jpg",),
    "Gir": ("/images/buffalo1.jpg",),
    "Sahiwal": ("/images/buffalo1.jpg",),
    "Red Sindhi": ("/images/cow2.jpg",),
    "Tharparkar": ("/images/cow1.jpg",),
    "Rathi": ("/images/cow3.jpg",),
}

DEFAULT_IMAGES: Tuple[str, ...] = (
    "/images/cow1.jpg",
    "/images/cow2.jpg",
    "/images/cow3.jpg",
    "/images/buffalo1.jpg",
)


def get_cattle_image(breed: str, rfid: str) -> str:
    """
    Image path for an animal.

    The index into the breed's candidates is the sum of the RFID's
    character codes modulo the number of candidates, so an animal always
    gets the same picture.
    """
    images = BREED_IMAGES.get(breed, DEFAULT_IMAGES)
    code_sum = sum(ord(char) for char in rfid)
    return images[code_sum % len(images)]
