"""Parse image names into Docker Hub repository references."""

from __future__ import annotations

from dataclasses import dataclass

# Namespace Docker Hub uses for official images ("nginx" -> "library/nginx").
_OFFICIAL_NAMESPACE = "library"


class ImageNameError(ValueError):
    """Raised when an image name cannot be turned into a reference."""


class InvalidImageName(ImageNameError):
    """Raised for names that are not valid image names at all."""

    def __init__(self, image: str) -> None:
        super().__init__(f"{image} is invalid image name")
        self.image = image


class UnsupportedRegistry(ImageNameError):
    """Raised for names that point at a registry other than Docker Hub."""

    def __init__(self, image: str) -> None:
        super().__init__(
            f"Registry other than Docker Hub not supported yet: {image}"
        )
        self.image = image


@dataclass(frozen=True)
class ImageReference:
    """Parsed reference to an image repository on Docker Hub.

    Attributes:
        namespace: Owner of the repository (``library`` for official images).
        name: Repository name (e.g. ``nginx``).
    """

    namespace: str
    name: str

    @property
    def repository(self) -> str:
        """Return the full repository path (e.g. ``library/nginx``)."""
        return f"{self.namespace}/{self.name}"

    @property
    def tags_path(self) -> str:
        """Return the API path of the tags listing (e.g. ``/library/nginx/tags``)."""
        return f"/{self.namespace}/{self.name}/tags"


def parse_image_name(image: str) -> ImageReference:
    """Parse an image name into an :class:`ImageReference`.

    Supported formats:

    * ``nginx``  (official image, expands to ``library/nginx``)
    * ``nginxinc/nginx-unprivileged``

    Args:
        image: The image name as typed by the user.

    Returns:
        An :class:`ImageReference` for the repository.

    Raises:
        UnsupportedRegistry: If the name carries a registry host
            (``host/org/image``).
        InvalidImageName: If the name has more segments than that, or an
            empty segment.
    """
    segments = image.split("/")

    if len(segments) == 3:
        raise UnsupportedRegistry(image)
    if len(segments) > 3 or not all(segments):
        raise InvalidImageName(image)

    if len(segments) == 1:
        return ImageReference(namespace=_OFFICIAL_NAMESPACE, name=segments[0])
    return ImageReference(namespace=segments[0], name=segments[1])
