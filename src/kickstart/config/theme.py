from questionary import Style

THEME_STYLES = {
    # Prompt
    "qmark": "fg:#5f87ff bold",
    "question": "bold",
    "answer": "fg:#00d787 bold",
    "pointer": "fg:#5f87ff bold",
    "highlighted": "fg:#5f87ff bold",
    "selected": "fg:#00d787",
    "separator": "fg:#6c6c6c",
    "instruction": "fg:#6c6c6c",
    "text": "",
    "disabled": "fg:#6c6c6c italic",
}

STYLE = Style(list(THEME_STYLES.items()))

# Rich markup colors for the console output
LOGO_GRADIENT = [
    "#0064c8",
    "#0078b4",
    "#008ca0",
    "#00a08c",
    "#00b478",
    "#14c864",
]

SUMMARY_COLORS = {
    "package_manager": "green",
    "framework": "yellow",
    "next_routing": "blue",
    "styling": "magenta",
    "routing": "blue",
    "state_management": "cyan",
    "api": "green",
    "testing": "blue",
    "deployment": "yellow",
    "editor": "blue",
}

BACK_OPTION_STYLE = "fg:#ff8c69"

LOGO = r"""
   __ __ _      __       __               __
  / //_/(_)____/ /__ ___/ /_ ___ _ ____ / /_
 / ,<  / // __/  '_/(_-< __// _ `// __// __/
/_/|_|/_/ \__/_/\_\/___/\__/ \_,_//_/   \__/
"""

TAGLINE = "A modern CLI tool for creating React applications"
