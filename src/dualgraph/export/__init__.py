from dualgraph.export.convert import to_networkx
from dualgraph.export.files import with_extension, write_dot
from dualgraph.export.render import render_ascii, render_dot

__all__ = [
    "render_ascii",
    "render_dot",
    "to_networkx",
    "with_extension",
    "write_dot",
]
