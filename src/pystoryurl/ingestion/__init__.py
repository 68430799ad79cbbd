"""Location ingestion.

Everything that reads a browser location lives here.  The rest of the
package only sees :class:`~pystoryurl.ingestion.location.InitialState`.
"""
