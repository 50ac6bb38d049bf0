import sys

from rich.pretty import pprint

from commandline import *

options = [
    switch_option(["--help", "--usage"], "ShowHelp", "Print this help text.", short_names=["-h", "-?"]),
    default_valued_option("--host", string("address"), "localhost", "Server.Host", "Address to bind the web server to."),
    default_valued_option("--port", integer("port", 1, 65535), "8080", "Server.Port", "Port to listen on."),
    valued_option("--model", string("path"), "Model.Path", "Path to the language model weights.", REQUIRED),
    valued_option("--mmproj", string("path"), "Model.Projector", "Path to the multimodal projector weights.", REQUIRED),
    default_valued_option("--threads", integer(1, 256), "4", "Inference.Threads", "Number of threads used for inference."),
    default_multivalued_option(
        "--context",
        [integer("size", 512, 32768), integer("batch", 1, 4096)],
        "2048,512",
        "Inference.Context",
        "Context window size and prompt batch size, separated by a comma.",
    ),
    switch_option("--verbose", "Logging.Verbose", "Print request and timing details."),
    complement_switch_option("--quiet", "Logging.Verbose", "Opposite of --verbose."),
]


if __name__ == '__main__':
    result = parse_command_line(options, sys.argv)
    if result.state.exit:
        sys.exit(1 if result.state.parse_error else 0)
    pprint(result.config.to_dict())
