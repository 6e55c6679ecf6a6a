"""Shared constants for HOI4 radio mod generation."""

# --- Engine ---

# Game version declared in both descriptors
HOI4_SUPPORTED_VERSION = "1.16.5"

# Tags written to the external descriptor; marks the mod as audio content
DESCRIPTOR_TAGS = ("Sound",)

# --- Music ---

ASSET_VOLUME = 0.65
CHANCE_FACTOR = 1

# --- Localisation ---

# HOI4 refuses localisation files without a UTF-8 byte-order mark
UTF8_BOM = b"\xef\xbb\xbf"
LOCALISATION_LANGUAGE = "l_english"

# --- Interface ---

FACEPLATE_FRAMES = 2
FACEPLATE_TEMPLATE = "radio_station.dds"
GUI_TEMPLATE = "faceplate.gui"

# --- Pipeline steps, in execution order ---

STEP_SETUP = "setup"
STEP_COPY_MUSIC = "copy_music"
STEP_DESCRIPTOR = "descriptor"
STEP_LOCALISATION = "localisation"
STEP_INTERFACE = "interface"
STEP_MUSIC_SCRIPT = "music_script"
STEP_ASSET_FILES = "asset_files"
STEP_DONE = "done"

PIPELINE_STEPS = (
    STEP_SETUP,
    STEP_COPY_MUSIC,
    STEP_DESCRIPTOR,
    STEP_LOCALISATION,
    STEP_INTERFACE,
    STEP_MUSIC_SCRIPT,
    STEP_ASSET_FILES,
    STEP_DONE,
)
