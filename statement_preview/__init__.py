"""Statement line-fit preview host.

WHY: The form_fit engine is a pure function over a width measurer. This
package supplies everything around it: configuration, concrete measurers,
a text/JSON report, a CLI and an HTTP preview service.

HOW: measurers/ provides the width backends, report.py renders previews,
cli.py and server/app.py are the two entry points.

RULES:
- All layout decisions come from form_fit; nothing here re-wraps text
- Measurers are chosen by registry key, never by import-time globals
"""

__version__ = "0.1.0"
