"""Package entry point for ``python -m statement_preview``.

``--serve`` starts the HTTP preview service; anything else goes to the CLI.
"""

import sys

if __name__ == "__main__":
    if "--serve" in sys.argv:
        from statement_preview.server.app import run_api
        run_api()
    else:
        from statement_preview.cli import main
        sys.exit(main())
