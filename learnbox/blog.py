"""A blog post that moves through draft, review and publication."""

from __future__ import annotations

import sys
from collections.abc import Sequence


class Draft:
    """A post still being written; its content is hidden."""

    shows_content = False

    def request_review(self) -> "PendingReview":
        return PendingReview()

    def approve(self) -> "Draft":
        return self

    def content(self, post: "Post") -> str:
        return post._text if self.shows_content else ""


class PendingReview:
    """A post awaiting approval; its content is hidden."""

    shows_content = False

    def request_review(self) -> "PendingReview":
        return self

    def approve(self) -> "Published":
        return Published()

    def content(self, post: "Post") -> str:
        return post._text if self.shows_content else ""


class Published:
    """An approved post; its content is visible."""

    shows_content = True

    def request_review(self) -> "Published":
        return self

    def approve(self) -> "Published":
        return self

    def content(self, post: "Post") -> str:
        return post._text if self.shows_content else ""


class Post:
    """A post whose text is only shown once published."""

    def __init__(self) -> None:
        self._state: Draft | PendingReview | Published = Draft()
        self._text = ""

    @property
    def state(self) -> Draft | PendingReview | Published:
        return self._state

    def add_text(self, text: str) -> None:
        self._text += text

    def content(self) -> str:
        return self._state.content(self)

    def request_review(self) -> None:
        self._state = self._state.request_review()

    def approve(self) -> None:
        self._state = self._state.approve()


class Wrapper(list):
    """A list of strings that prints as ``[a, b, c]``."""

    def __str__(self) -> str:
        return "[" + ", ".join(self) + "]"


def main(argv: Sequence[str] | None = None) -> int:
    post = Post()
    post.add_text("I ate a salad for lunch today")
    print(f"draft: {post.content()!r}")
    post.request_review()
    print(f"pending review: {post.content()!r}")
    post.approve()
    print(f"published: {post.content()!r}")

    wrapper = Wrapper(["hello", "world"])
    wrapper.append("rust")
    print(f"w = {wrapper}")
    for item in wrapper:
        print(item)
    return 0


if __name__ == "__main__":
    sys.exit(main())