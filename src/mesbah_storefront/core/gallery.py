"""Thumbnail gallery selection."""


class ThumbnailGallery:
    """A main image plus a strip of thumbnails, exactly one of them active.

    Attributes:
        images: Image sources, in thumbnail order.
        active_index: Index of the highlighted thumbnail.
    """

    def __init__(self, images: list[str], active_index: int = 0) -> None:
        if not images:
            raise ValueError("A gallery needs at least one image")
        self.images = list(images)
        self.active_index = 0
        self.select(active_index)

    @property
    def main_image(self) -> str:
        return self.images[self.active_index]

    def is_active(self, index: int) -> bool:
        return index == self.active_index

    def select(self, index: int) -> str:
        """Activate a thumbnail and return the new main image source.

        Raises:
            IndexError: If ``index`` does not name a thumbnail.
        """
        if not 0 <= index < len(self.images):
            raise IndexError(f"No thumbnail at index {index}")
        self.active_index = index
        return self.main_image
