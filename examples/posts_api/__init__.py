"""Example blog-post API that answers every request with a JSend envelope."""
