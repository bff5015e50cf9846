"""Main entry point for vidgrab."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from .core import (
    VidGrabError,
    DownloadError,
    VideoLinkMissingError,
    FormatNotFoundError,
    TitleNotFoundError,
    YouTubeClient,
    MediaDownloader,
    quality_codec_predicate,
    get_video_download_url,
    get_video_file_name,
)
from .core.session import build_session
from .utils import Config, setup_logging, log_error, resolve_output_path
from .version import __version__

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="vidgrab",
        description="Download the 360p MP4 rendition of a YouTube video.",
    )
    parser.add_argument("link", nargs="?", help="watch page URL, e.g. https://www.youtube.com/watch?v=<id>")
    parser.add_argument("-o", "--output-dir", help="directory to save into (default: current directory)")
    parser.add_argument("--quality", help="quality label to select (default: 360p)")
    parser.add_argument("--codec", help="codec token the MIME type must contain (default: mp4)")
    parser.add_argument("--config", type=Path, help="JSON settings file")
    parser.add_argument("--no-sanitize", action="store_true",
                        help="use the video title verbatim as the file name")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def run(link: Optional[str], config: Config) -> Path:
    """Run the pipeline for one page URL and return the saved file's path."""
    if not link:
        raise VideoLinkMissingError()

    session = build_session(max_retries=config.max_retries, user_agent=config.user_agent)
    with session:
        client = YouTubeClient(info_url=config.info_url, session=session,
                               timeout=config.timeout, check_status=config.check_status)
        video_info = client.get_video_info(link)

        predicate = quality_codec_predicate(config.quality, config.codec)
        url = get_video_download_url(video_info, predicate)
        if not url:
            raise FormatNotFoundError(
                f"video download url not found ({config.quality}, codec {config.codec})")

        file_name = get_video_file_name(video_info, extension=config.extension,
                                        sanitize=config.sanitize_filenames)
        if file_name is None:
            raise TitleNotFoundError()

        output_path = resolve_output_path(config.output_dir, file_name)
        try:
            config.output_dir.expanduser().mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise DownloadError(f"Could not create {config.output_dir}: {e}") from e
        logger.info(f"Downloading '{video_info.title}' to {output_path}")
        downloader = MediaDownloader(url, output_path, session=session, timeout=config.timeout)
        return downloader.start()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    setup_logging(args.verbose)

    config = Config(args.config)
    config.update(
        output_dir=args.output_dir,
        quality=args.quality,
        codec=args.codec,
        sanitize_filenames=False if args.no_sanitize else None,
    )

    try:
        logger.debug(f"Starting vidgrab v{__version__}")
        output_path = run(args.link, config)
        logger.info(f"Done: {output_path}")
        return 0
    except KeyboardInterrupt:
        logger.info("Download interrupted by user")
        return 130
    except VidGrabError as e:
        logger.error(str(e))
        log_error(f"vidgrab failed for {args.link!r}: {e}", e)
        return 1
    except Exception as e:
        logger.error(f"Fatal error in main(): {e}", exc_info=True)
        log_error("Fatal error in main()", e)
        raise


if __name__ == "__main__":
    sys.exit(main())
