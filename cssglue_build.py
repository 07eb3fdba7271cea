# cssglue_build.py
# Build file for the demo stylesheets: `cssglue plan` to inspect, `cssglue run` to build
from __future__ import annotations
from cssglue import targets, target, files

BANNER = "/*! demo styles | MIT */\n"

TARGETS = targets(
    # Site bundle - plain css + less, readable and minified variants
    target(
        "site",
        files("dist/site", "reset.css", "layout.less", cwd="styles"),
        banner=BANNER,
    ),

    # Theme - sass only, shipped minified with the banner kept
    target(
        "theme",
        files("dist/theme", "theme.scss", "_overrides.sass", cwd="styles/theme"),
        output="minified",
        banner=BANNER,
        banner_on="minified",
        sass={"loadPath": ["styles/theme/partials"]},
    ),

    # Print sheet - no minification, no banner
    target(
        "print",
        files("dist/print", "print.css", cwd="styles"),
        output="clean",
        concat={"separator": "\n"},
    ),
)
