"""Rank the most viewed videos of a video-site hashtag page."""

from __future__ import annotations

import argparse
import json
import re
from dataclasses import dataclass
from datetime import datetime
from urllib.error import HTTPError
from urllib.request import urlopen

YT_HASHTAG_ENDPOINT = "https://www.youtube.com/hashtag/"
TITLE_PATTERN = b'"title":{"runs":[{"text":'
YEAR_PREFIX = "visualizações há"

_KEY_LENGTH = len(b'"title":')
_INTEGER = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class VideoInfo:
    """A video as listed on a hashtag page."""

    channel_name: str
    video_title: str
    views: int
    year: int


def extract_snippets(body: bytes) -> list[bytes]:
    """Return the JSON objects that follow each title key in the page."""
    snippets = []
    i = 0
    while i < len(body) - 100:
        i = body.find(TITLE_PATTERN, i)
        if i < 0:
            break
        end = i - 1
        for _ in range(4):
            end = body.find(b"}", end + 1)
            if end < 0:
                return snippets
        end += 1
        if i + _KEY_LENGTH < end:
            snippets.append(body[i + _KEY_LENGTH:end])
        i = end
    return snippets


def _atoi(text: str) -> int | None:
    return int(text) if _INTEGER.fullmatch(text) else None


def parse_video(snippet: bytes | str, current_year: int) -> VideoInfo:
    """Read title, channel, views and year from one snippet; raise ValueError if it is unusable."""
    draft = json.loads(snippet)
    try:
        title = draft["runs"][0]["text"]
        label = draft["accessibility"]["accessibilityData"]["label"]
    except (KeyError, IndexError, TypeError) as exc:
        raise ValueError("invalid video snippet") from exc
    if not isinstance(title, str) or not isinstance(label, str):
        raise ValueError("invalid video snippet")
    raw = label.encode("utf-8")
    cut = len(title.encode("utf-8")) + 1
    if cut > len(raw):
        raise ValueError("video label is shorter than its title")
    words = raw[cut:].decode("utf-8", "replace").split(" ")

    views_index, views = len(words) - 1, 0
    for index, word in enumerate(words[:-1]):
        number = _atoi(word.replace(".", ""))
        if number is not None:
            views_index, views = index, number
            break

    prefix = YEAR_PREFIX.encode("utf-8")
    year_start = raw.find(prefix) + len(prefix)
    if year_start > len(raw):
        raise ValueError("video label has no age")
    years_ago = _atoi(raw[year_start:].decode("utf-8", "replace").strip().split(" ")[0]) or 0
    return VideoInfo(" ".join(words[:views_index]), title, views, current_year - years_ago)


def rank_videos(body: bytes, current_year: int | None = None) -> list[VideoInfo]:
    """Return the page's videos, most viewed first and older first on ties."""
    year = datetime.now().year if current_year is None else current_year
    videos = []
    for snippet in extract_snippets(body):
        try:
            videos.append(parse_video(snippet, year))
        except ValueError:
            continue
    return sorted(videos, key=lambda video: (-video.views, video.year))


def format_ranking(videos: list[VideoInfo], hashtag: str, top_n: int) -> str:
    """Render the first top_n videos as a report."""
    return f"Top {top_n} most popular videos on Youtube with #{hashtag}\n\n" + "".join(
        f"{rank:2d}\tTitle:   {v.video_title}\n\tViews:   {v.views}\n"
        f"\tChannel: {v.channel_name}\n\tYear:    {v.year}\t\n\n"
        for rank, v in enumerate(videos[:top_n], 1)
    )


def fetch_page(hashtag: str) -> bytes:
    """Download the hashtag page."""
    try:
        response = urlopen(f"{YT_HASHTAG_ENDPOINT}/{hashtag}", timeout=30)
    except HTTPError as exc:
        response = exc
    with response:
        return response.read()


def _unsigned(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError("must not be negative")
    return value


def main(argv: list[str] | None = None) -> int:
    """Print the most popular videos for a hashtag."""
    parser = argparse.ArgumentParser(description="Hashtag video ranking")
    parser.add_argument("-ht", dest="hashtag", default="ai", help="target hashtag")
    parser.add_argument("-t", dest="top_n", type=_unsigned, default=10, help="top N")
    args = parser.parse_args(argv)
    if len(args.hashtag) < 2:
        print("undefined hashtag")
    body = fetch_page(args.hashtag)
    print(format_ranking(rank_videos(body), args.hashtag, args.top_n), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())