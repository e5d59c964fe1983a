import argparse
import json
import re
import sys
from datetime import datetime, timezone
from pathlib import Path
from dotenv import load_dotenv

from transcript_errors import TranscriptError
from transcript_sources import PROVIDERS, fetch_transcript

load_dotenv()
# Configuration
# Transcripts land in transcripts/ beside this script
ROOT = Path(__file__).resolve().parent
TRANSCRIPTS_DIR = ROOT / "transcripts"

USAGE = """
  %(prog)s <youtube-url-or-id>
  %(prog)s <youtube-url-or-id> --lang en
  %(prog)s <youtube-url-or-id> --output custom-name"""

# Flags that take the next token as their value, whatever it looks like
VALUE_FLAGS = ("--lang", "--output")

VIDEO_ID_RE = re.compile(r"[a-zA-Z0-9_-]{11}")
VIDEO_URL_PATTERNS = [
    re.compile(r"(?:youtube\.com/watch\?v=|youtu\.be/|youtube\.com/embed/|youtube\.com/shorts/)([a-zA-Z0-9_-]{11})"),
    re.compile(r"youtube\.com/watch\?.*v=([a-zA-Z0-9_-]{11})"),
]


class ArgumentParser(argparse.ArgumentParser):
    """argparse parser that reports usage errors with exit status 1."""

    def error(self, message):
        print(f"Error: {message}\n", file=sys.stderr)
        self.print_usage(sys.stderr)
        sys.exit(1)


# Helpers
def build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="fetch-transcript",
        usage=USAGE,
        description="Fetch a YouTube transcript and save it to transcripts/ as plain text",
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument("video", nargs="?", help="YouTube video URL or ID")
    parser.add_argument("--lang", default="en", help="Transcript language code (default: en)")
    parser.add_argument("--output", help="Output file name, without extension (default: the video ID)")
    parser.add_argument("--provider", choices=PROVIDERS, default="youtube", help="Transcript source (default: youtube)")
    parser.add_argument("--json", action="store_true", help="Also save segments and metadata as JSON")
    parser.add_argument("--help", action="help", help="Show this help message and exit")
    return parser


def scan_arguments(argv):
    """
    Pull the video and the --lang/--output values out of argv.

    Returns (video, values, rest). The last token not starting with "--" is
    the video. A value flag without a following token is ignored. Everything
    else that starts with "--" is left in rest for argparse.
    """
    video = None
    values = {}
    rest = []
    i = 0
    while i < len(argv):
        token = argv[i]
        if token in VALUE_FLAGS:
            if i + 1 < len(argv):
                values[token[2:]] = argv[i + 1]
                i += 1
        elif token == "--provider" and i + 1 < len(argv):
            rest.extend(argv[i:i + 2])
            i += 1
        elif token.startswith("--"):
            rest.append(token)
        else:
            video = token
        i += 1
    return video, values, rest


def parse_arguments(argv=None) -> argparse.Namespace:
    """
    Parse command-line tokens.

    Unknown "--" flags are ignored. Exits with status 1 if no video is given.
    """
    if argv is None:
        argv = sys.argv[1:]
    parser = build_parser()
    video, values, rest = scan_arguments(argv)
    args, _ = parser.parse_known_args(rest)

    args.video = video
    for name, value in values.items():
        setattr(args, name, value)
    if not args.video:
        parser.error("YouTube URL or video ID is required")
    return args


def extract_video_id(value: str) -> str:
    """Extract the 11-character video ID from a URL, or return the input unchanged."""
    if VIDEO_ID_RE.fullmatch(value):
        return value

    for pattern in VIDEO_URL_PATTERNS:
        match = pattern.search(value)
        if match:
            return match.group(1)

    # Let the transcript source reject it
    return value


def build_text(segments) -> str:
    return " ".join(segment["text"] for segment in segments)


def resolve_output_path(video_id: str, output_name: str = None, suffix: str = ".txt") -> Path:
    name = output_name if output_name else video_id
    return TRANSCRIPTS_DIR / f"{name}{suffix}"


def ensure_transcripts_dir():
    if not TRANSCRIPTS_DIR.exists():
        TRANSCRIPTS_DIR.mkdir(parents=True, exist_ok=True)
        print(f"✓ Created transcripts directory: {TRANSCRIPTS_DIR}")


def save_transcript(segments, video_id: str, output_name: str = None) -> Path:
    """Write the space-joined transcript text, creating transcripts/ if needed."""
    ensure_transcripts_dir()
    text_path = resolve_output_path(video_id, output_name)
    text_path.write_text(build_text(segments), encoding="utf-8")
    print(f"✓ Plain text version saved to: {text_path}")
    return text_path


def save_transcript_json(segments, args, video_id: str) -> Path:
    ensure_transcripts_dir()
    json_path = resolve_output_path(video_id, args.output, suffix=".json")
    data = {
        "videoId": video_id,
        "videoUrl": args.video,
        "lang": args.lang,
        "provider": args.provider,
        "fetchedAt": datetime.now(timezone.utc).isoformat(),
        "segments": segments,
        "text": build_text(segments),
    }
    with open(json_path, "w", encoding="utf-8") as fout:
        json.dump(data, fout, ensure_ascii=False, indent=2)
    print(f"✓ Transcript saved to: {json_path}")
    return json_path


# Main
def main(argv=None) -> int:
    args = parse_arguments(argv)
    video_id = extract_video_id(args.video)

    print(f"Fetching transcript for video: {video_id}")
    print(f"Language: {args.lang}")

    try:
        segments = fetch_transcript(video_id, args.lang, provider=args.provider)
    except TranscriptError as e:
        print("\n✗ Error fetching transcript:", file=sys.stderr)
        for line in e.user_lines():
            print(f"  {line}", file=sys.stderr)
        return 1

    print(f"✓ Transcript fetched successfully ({len(segments)} segments)")

    # Either both files are written or neither is
    json_path = None
    try:
        if args.json:
            json_path = save_transcript_json(segments, args, video_id)
        save_transcript(segments, video_id, args.output)
    except OSError as e:
        if json_path is not None:
            json_path.unlink(missing_ok=True)
        print("\n✗ Error saving transcript:", file=sys.stderr)
        print(f"  {e}", file=sys.stderr)
        return 1

    print("\n✓ Done!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
