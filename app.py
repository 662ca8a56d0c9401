#!/usr/bin/env python3
"""
Run script for the warehouse inventory service
"""

import argparse
import os
import sys

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

from freshstock import create_app  # noqa: E402
from freshstock.build import build_database  # noqa: E402
from freshstock.utils.logger import get_logger  # noqa: E402

logger = get_logger("freshstock.run")


def parse_arguments():
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(description='Fresh-goods warehouse inventory API')
    parser.add_argument('--build-only', action='store_true',
                        help='Create tables and seed lookup data, then exit without starting the server')
    parser.add_argument('--no-seed', action='store_false', dest='seed',
                        help='Do not insert lookup data (product types, order statuses)')
    parser.add_argument('--host', default=os.environ.get('FLASK_HOST', '127.0.0.1'),
                        help='Server host (default: FLASK_HOST or 127.0.0.1)')
    parser.add_argument('--port', type=int, default=int(os.environ.get('FLASK_PORT', '8080')),
                        help='Server port (default: FLASK_PORT or 8080)')
    return parser.parse_args()


if __name__ == '__main__':
    args = parse_arguments()

    app = create_app()

    with app.app_context():
        build_database(seed=args.seed)

    if args.build_only:
        logger.info("Build completed. Exiting without starting web server.")
        sys.exit(0)

    # FLASK_DEBUG: Enable/disable debug mode (default: False)
    debug_mode = os.environ.get('FLASK_DEBUG', 'False').lower() in ('true', '1', 'yes', 'on')

    if debug_mode:
        logger.warning("DEBUG MODE ENABLED - Do not use in production!")

    logger.info(f"Starting server on {args.host}:{args.port} (debug={debug_mode})")
    app.run(debug=debug_mode, host=args.host, port=args.port, use_reloader=False)
