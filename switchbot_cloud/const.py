"""Constants for switchbot_cloud."""

from logging import Logger, getLogger

LOGGER: Logger = getLogger(__package__)

DEFAULT_ENDPOINT = "https://api.switch-bot.com"
DEFAULT_TIMEOUT = 15.0
API_VERSION = "v1.1"

# Envelope status codes
STATUS_SUCCESS = 100
STATUS_DEVICE_TYPE_MISMATCH = 151
STATUS_DEVICE_NOT_FOUND = 152
STATUS_COMMAND_UNSUPPORTED = 160
STATUS_DEVICE_OFFLINE = 161
STATUS_HUB_OFFLINE = 171
STATUS_CONFLICT = 190

# ----- Physical device types (device list / status "deviceType") -----
DEVICE_TYPE_HUB = "Hub"
DEVICE_TYPE_HUB_PLUS = "Hub Plus"
DEVICE_TYPE_HUB_MINI = "Hub Mini"
DEVICE_TYPE_HUB_2 = "Hub 2"
DEVICE_TYPE_BOT = "Bot"
DEVICE_TYPE_CURTAIN = "Curtain"
DEVICE_TYPE_PLUG = "Plug"
DEVICE_TYPE_METER = "Meter"
DEVICE_TYPE_METER_PLUS = "MeterPlus"
DEVICE_TYPE_METER_PLUS_JP = "Meter Plus (JP)"
DEVICE_TYPE_METER_PLUS_US = "Meter Plus (US)"
DEVICE_TYPE_METER_PRO = "MeterPro"
DEVICE_TYPE_METER_PRO_CO2 = "MeterPro(CO2)"
DEVICE_TYPE_OUTDOOR_METER = "WoIOSensor"
DEVICE_TYPE_HUMIDIFIER = "Humidifier"
DEVICE_TYPE_SMART_FAN = "Smart Fan"
DEVICE_TYPE_STRIP_LIGHT = "Strip Light"
DEVICE_TYPE_PLUG_MINI_US = "Plug Mini (US)"
DEVICE_TYPE_PLUG_MINI_JP = "Plug Mini (JP)"
DEVICE_TYPE_LOCK = "Smart Lock"
DEVICE_TYPE_ROBOT_VACUUM_S1 = "Robot Vacuum Cleaner S1"
DEVICE_TYPE_ROBOT_VACUUM_S1_PLUS = "Robot Vacuum Cleaner S1 Plus"
DEVICE_TYPE_SWEEPER_MINI = "WoSweeperMini"
DEVICE_TYPE_MOTION_SENSOR = "Motion Sensor"
DEVICE_TYPE_CONTACT_SENSOR = "Contact Sensor"
DEVICE_TYPE_COLOR_BULB = "Color Bulb"
DEVICE_TYPE_KEYPAD = "KeyPad"
DEVICE_TYPE_KEYPAD_TOUCH = "KeyPad Touch"
DEVICE_TYPE_CEILING_LIGHT = "Ceiling Light"
DEVICE_TYPE_CEILING_LIGHT_PRO = "Ceiling Light Pro"
DEVICE_TYPE_INDOOR_CAM = "Indoor Cam"
DEVICE_TYPE_PAN_TILT_CAM = "Pan/Tilt Cam"
DEVICE_TYPE_PAN_TILT_CAM_2K = "Pan/Tilt Cam 2K"
DEVICE_TYPE_BLIND_TILT = "Blind Tilt"

# ----- Virtual infrared remote types ("remoteType") -----
REMOTE_TYPE_AIR_CONDITIONER = "Air Conditioner"
REMOTE_TYPE_TV = "TV"
REMOTE_TYPE_LIGHT = "Light"
REMOTE_TYPE_IPTV_STREAMER = "IPTV/Streamer"
REMOTE_TYPE_SET_TOP_BOX = "Set Top Box"
REMOTE_TYPE_DVD = "DVD"
REMOTE_TYPE_FAN = "Fan"
REMOTE_TYPE_PROJECTOR = "Projector"
REMOTE_TYPE_CAMERA = "Camera"
REMOTE_TYPE_AIR_PURIFIER = "Air Purifier"
REMOTE_TYPE_SPEAKER = "Speaker"
REMOTE_TYPE_WATER_HEATER = "Water Heater"
REMOTE_TYPE_VACUUM_CLEANER = "Vacuum Cleaner"
REMOTE_TYPE_OTHERS = "Others"

# ----- Webhook discriminators ("context.deviceType") -----
WEBHOOK_BOT = "WoHand"
WEBHOOK_CURTAIN = "WoCurtain"
WEBHOOK_CURTAIN_3 = "WoCurtain3"
WEBHOOK_MOTION_SENSOR = "WoPresence"
WEBHOOK_CONTACT_SENSOR = "WoContact"
WEBHOOK_METER = "WoMeter"
WEBHOOK_METER_PLUS = "WoMeterPlus"
WEBHOOK_OUTDOOR_METER = "WoIOSensor"
WEBHOOK_HUB_2 = "WoHub2"
WEBHOOK_LOCK = "WoLock"
WEBHOOK_LOCK_PRO = "WoLockPro"
WEBHOOK_KEYPAD = "WoKeypad"
WEBHOOK_KEYPAD_TOUCH = "WoKeypadTouch"
WEBHOOK_INDOOR_CAM = "WoCamera"
WEBHOOK_PAN_TILT_CAM = "WoPanTiltCam"
WEBHOOK_COLOR_BULB = "WoBulb"
WEBHOOK_STRIP_LIGHT = "WoStrip"
WEBHOOK_PLUG_MINI_US = "WoPlugUS"
WEBHOOK_PLUG_MINI_JP = "WoPlugJP"
WEBHOOK_SWEEPER = "WoSweeper"
WEBHOOK_SWEEPER_PLUS = "WoSweeperPlus"
WEBHOOK_CEILING = "WoCeiling"
WEBHOOK_CEILING_PRO = "WoCeilingPro"
WEBHOOK_BLIND_TILT = "WoBlindTilt"

# Display type -> webhook discriminator. The vendor's own examples disagree with
# the tags devices actually send, so this stays a separate table and only lists
# pairs that have been observed.
WEBHOOK_DEVICE_TYPES: dict[str, str] = {
    DEVICE_TYPE_BOT: WEBHOOK_BOT,
    DEVICE_TYPE_CURTAIN: WEBHOOK_CURTAIN,
    DEVICE_TYPE_MOTION_SENSOR: WEBHOOK_MOTION_SENSOR,
    DEVICE_TYPE_CONTACT_SENSOR: WEBHOOK_CONTACT_SENSOR,
    DEVICE_TYPE_METER: WEBHOOK_METER,
    DEVICE_TYPE_METER_PLUS: WEBHOOK_METER_PLUS,
    DEVICE_TYPE_OUTDOOR_METER: WEBHOOK_OUTDOOR_METER,
    DEVICE_TYPE_HUB_2: WEBHOOK_HUB_2,
    DEVICE_TYPE_LOCK: WEBHOOK_LOCK,
    DEVICE_TYPE_KEYPAD: WEBHOOK_KEYPAD,
    DEVICE_TYPE_KEYPAD_TOUCH: WEBHOOK_KEYPAD_TOUCH,
    DEVICE_TYPE_INDOOR_CAM: WEBHOOK_INDOOR_CAM,
    DEVICE_TYPE_PAN_TILT_CAM: WEBHOOK_PAN_TILT_CAM,
    DEVICE_TYPE_COLOR_BULB: WEBHOOK_COLOR_BULB,
    DEVICE_TYPE_STRIP_LIGHT: WEBHOOK_STRIP_LIGHT,
    DEVICE_TYPE_PLUG_MINI_US: WEBHOOK_PLUG_MINI_US,
    DEVICE_TYPE_PLUG_MINI_JP: WEBHOOK_PLUG_MINI_JP,
    DEVICE_TYPE_ROBOT_VACUUM_S1: WEBHOOK_SWEEPER,
    DEVICE_TYPE_ROBOT_VACUUM_S1_PLUS: WEBHOOK_SWEEPER_PLUS,
    DEVICE_TYPE_CEILING_LIGHT: WEBHOOK_CEILING,
    DEVICE_TYPE_CEILING_LIGHT_PRO: WEBHOOK_CEILING_PRO,
    DEVICE_TYPE_BLIND_TILT: WEBHOOK_BLIND_TILT,
}


def webhook_device_type(display_type: str) -> str | None:
    """Return the webhook discriminator for a display device type, if known."""
    return WEBHOOK_DEVICE_TYPES.get(display_type)


# ----- Open vendor tokens -----
POWER_ON = "ON"
POWER_OFF = "OFF"

AMBIENT_BRIGHTNESS_BRIGHT = "bright"
AMBIENT_BRIGHTNESS_DIM = "dim"

OPEN_STATE_OPEN = "open"
OPEN_STATE_CLOSE = "close"
OPEN_STATE_TIMEOUT_NOT_CLOSE = "timeOutNotClose"

CLEANER_ONLINE = "online"
CLEANER_OFFLINE = "offline"

CLEANER_STANDBY = "StandBy"
CLEANER_CLEARING = "Clearing"
CLEANER_PAUSED = "Paused"
CLEANER_GOTO_CHARGE_BASE = "GotoChargeBase"
CLEANER_CHARGING = "Charging"
CLEANER_CHARGE_DONE = "ChargeDone"
CLEANER_DORMANT = "Dormant"
CLEANER_IN_TROUBLE = "InTrouble"
CLEANER_IN_REMOTE_CONTROL = "InRemoteControl"
CLEANER_IN_DUST_COLLECTING = "InDustCollecting"

PASSCODE_PERMANENT = "permanent"
PASSCODE_TIME_LIMIT = "timeLimit"
PASSCODE_DISPOSABLE = "disposable"
PASSCODE_URGENT = "urgent"

PASSCODE_STATUS_VALID = "normal"
PASSCODE_STATUS_EXPIRED = "expired"

WEBHOOK_DEVICE_LIST_ALL = "ALL"
