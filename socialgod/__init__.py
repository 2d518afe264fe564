"""
Social GOD - a content console that turns a topic into a short-video script.

The persona document conditions every request, the credential gate decides
whether generation is offered at all, and generated scripts are kept in a
small local history.
"""

__version__ = "2.5.0"
