"""Version descriptor for the Tiles course format."""

COMPONENT = "format_tiles"
VERSION = 2023112100
RELEASE = "4.3.1.0"
REQUIRES = 2023100900
MATURITY = "stable"
