"""Static metadata describing the trivia host."""

APP_NAME = "Trivia Night"
APP_VERSION = "0.1"
APP_ABOUT_TEXT = (
    "Trivia Night helps a host author rounds of questions and present an event "
    "on a big screen, with the current slide mirrored to browsers on the local network."
)
