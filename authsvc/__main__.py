# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from authsvc.app import create_app
from authsvc.shared.config import load_config


def main() -> None:
    config = load_config()
    app = create_app(config)
    app.run(host=config.server.host, port=config.server.port, threaded=True)


if __name__ == "__main__":
    main()
