"""Local web front end: drop an image, download its Lottie JSON."""

import logging
from typing import Optional

import click
from flask import Flask, jsonify, render_template, request, send_file
from werkzeug.exceptions import RequestEntityTooLarge

from . import __version__
from .cli import configure_logging
from .core.export import LottieExporter, export_filename
from .core.session import ConversionSession
from .utils.image import NOT_AN_IMAGE_MESSAGE, ImageLoadError, NotAnImageError

logger = logging.getLogger(__name__)

DEFAULT_MAX_UPLOAD_MB = 32
GENERIC_MIME_TYPE = "application/octet-stream"


def _read_upload():
    """Load the uploaded ``file`` field into a fresh session."""
    upload = request.files.get("file")
    if upload is None or not upload.filename:
        raise NotAnImageError()

    # Generic clients such as curl label every part as octet-stream
    mime_type = upload.mimetype
    if mime_type in ("", GENERIC_MIME_TYPE):
        mime_type = None

    session = ConversionSession()
    session.select_upload(upload.read(), filename=upload.filename, mime_type=mime_type)
    return session


def create_app(config: Optional[dict] = None) -> Flask:
    """Create the Flask app; ``config`` overrides ``app.config`` entries."""
    app = Flask(__name__)
    app.config["MAX_CONTENT_LENGTH"] = DEFAULT_MAX_UPLOAD_MB * 1024 * 1024
    if config:
        app.config.update(config)

    @app.errorhandler(NotAnImageError)
    def not_an_image(e):
        logger.info(f"Rejected upload {e.filename!r} ({e.mime_type or 'unknown type'})")
        return jsonify({"success": False, "error": NOT_AN_IMAGE_MESSAGE}), 400

    @app.errorhandler(ImageLoadError)
    def load_failed(e):
        logger.warning(f"Image could not be converted: {e}")
        return jsonify({"success": False, "error": str(e)}), 400

    @app.errorhandler(RequestEntityTooLarge)
    def too_large(e):
        limit_mb = app.config["MAX_CONTENT_LENGTH"] / (1024 * 1024)
        return jsonify({"success": False, "error": f"File too large (limit {limit_mb:.0f} MB)"}), 413

    @app.route("/health")
    def health():
        """Health check endpoint"""
        return jsonify({"status": "ok", "version": __version__})

    @app.route("/")
    def index():
        """Upload page"""
        return render_template("index.html", version=__version__)

    @app.route("/api/inspect", methods=["POST"])
    def inspect_image():
        """Report the natural size of an uploaded image"""
        session = _read_upload()
        asset = session.asset
        return jsonify({
            "success": True,
            "width": asset.width,
            "height": asset.height,
            "mime_type": asset.mime_type,
            "filename": asset.filename,
            "download_name": export_filename(asset.filename),
        })

    @app.route("/api/convert", methods=["POST"])
    def convert_image():
        """Return the Lottie JSON for an uploaded image as an attachment"""
        session = _read_upload()
        document = session.build_document()
        filename, buffer = LottieExporter().to_download(document, session.asset.filename)
        logger.info(f"Sending {filename}")
        return send_file(
            buffer,
            mimetype="application/json",
            as_attachment=True,
            download_name=filename,
        )

    return app


@click.command()
@click.option("--host", default="127.0.0.1", show_default=True, help="Interface to bind")
@click.option("--port", default=5000, show_default=True, type=click.IntRange(1, 65535), help="Port to listen on")
@click.option(
    "--max-upload-mb",
    default=DEFAULT_MAX_UPLOAD_MB,
    show_default=True,
    type=click.IntRange(1, 1024),
    help="Largest accepted upload",
)
@click.option("--debug", is_flag=True, help="Run Flask in debug mode")
def main(host: str, port: int, max_upload_mb: int, debug: bool) -> None:
    """Serve the image to Lottie converter page."""
    configure_logging(verbose=True)
    app = create_app({"MAX_CONTENT_LENGTH": max_upload_mb * 1024 * 1024})
    click.echo(f"🎞️  LottieThis v{__version__} - http://{host}:{port}/")
    app.run(host=host, port=port, debug=debug)


if __name__ == "__main__":
    main()
