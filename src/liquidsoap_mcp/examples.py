"""Canned Liquidsoap snippets for common tasks."""

from __future__ import annotations

from types import MappingProxyType

_ICECAST = 'output.icecast(%mp3, host="localhost", port=8000, password="hackme", mount="radio"'

# Order matters: the first key matching a task wins.
EXAMPLES: MappingProxyType[str, str] = MappingProxyType(
    {
        "basic-stream": f"""# Basic radio stream from a playlist
playlist = playlist("/path/to/playlist.m3u")
{_ICECAST}, playlist)""",
        "crossfade": f"""# Crossfade between tracks
playlist = playlist("/path/to/playlist.m3u")
playlist = crossfade(playlist)
{_ICECAST}, playlist)""",
        "fallback": f"""# Fallback to another source when primary fails
primary = input.http("http://primary-stream.com/live")
backup = playlist("/path/to/backup.m3u")
radio = fallback(track_sensitive=false, [primary, backup])
{_ICECAST}, radio)""",
        "metadata": f"""# Add custom metadata
s = playlist("/path/to/playlist.m3u")
s = insert_metadata(s)
s.insert_metadata([("artist", "Custom Artist"), ("title", "Custom Title")])
{_ICECAST}, s)""",
        "normalize": f"""# Normalize audio levels using LUFS
playlist = playlist("/path/to/playlist.m3u")
playlist = normalize_track_gain(playlist)
{_ICECAST}, playlist)""",
        "blank-detection": f"""# Detect and skip blank audio
playlist = playlist("/path/to/playlist.m3u")
playlist = blank.strip(playlist)
{_ICECAST}, playlist)""",
        "hls-output": """# Output as HLS stream
radio = playlist("/path/to/playlist.m3u")
output.file.hls(
  playlist="live.m3u8",
  "/path/to/output/",
  radio
)""",
        "harbor": f"""# Accept input via HTTP (Harbor)
live = input.harbor("live", port=8080, password="hackme")
playlist = playlist("/path/to/playlist.m3u")
radio = fallback(track_sensitive=false, [live, playlist])
{_ICECAST}, radio)""",
        "cron": """# Schedule tasks with cron
# Play a jingle every hour at minute 0
jingle = single("/path/to/jingle.mp3")
cron.add(predicate="0 * * * *", fun() begin
  jingle.seek(0.0)
end)""",
        "encoding-formats": """# Different encoding formats

# MP3
%mp3(bitrate=128)

# AAC
%fdkaac(bitrate=64, afterburner=true, aot="mpeg4_aac_lc")

# Opus
%opus(bitrate=96, application="audio", signal="music")

# Vorbis
%vorbis(quality=0.5)

# FLAC
%flac(compression=5)""",
    }
)


def find_example_key(task: str) -> str | None:
    """Return the first key that contains the task, or is contained in it."""
    needle = task.lower()
    for key in EXAMPLES:
        if needle in key or key in needle:
            return key
    return None


def get_example(task: str) -> str:
    key = find_example_key(task)
    if key is None:
        available = ", ".join(EXAMPLES)
        return f'No specific example found for "{task}". Available examples: {available}'
    return f'Example for "{task}":\n\n{EXAMPLES[key]}'
