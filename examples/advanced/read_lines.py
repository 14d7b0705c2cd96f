"""Read one S-expression per line from a stream in permissive mode."""

import io

from sexpline import iter_parse

stream = io.StringIO("(user alice |YWRtaW4=|)\n(user bob #00#)\n")

for node in iter_parse(stream, "permissive"):
    print(node[1], node[2])
