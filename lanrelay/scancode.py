"""Keyboard scancode tables for Windows (set 1) and Linux evdev key codes.

Member names double as the human-readable form of a key, so they follow
the naming used in log and event output (e.g. ``KeyLeftShift``).
"""

from enum import IntEnum, unique

__all__ = ["Windows", "Linux"]


@unique
class Windows(IntEnum):
    """Windows scan codes; extended keys carry an ``0xE0`` prefix byte."""

    Shutdown = 0xE05E
    SystemSleep = 0xE05F
    SystemWakeUp = 0xE063
    ErrorRollOver = 0x00FF
    KeyA = 0x001E
    KeyB = 0x0030
    KeyC = 0x002E
    KeyD = 0x0020
    KeyE = 0x0012
    KeyF = 0x0021
    KeyG = 0x0022
    KeyH = 0x0023
    KeyI = 0x0017
    KeyJ = 0x0024
    KeyK = 0x0025
    KeyL = 0x0026
    KeyM = 0x0032
    KeyN = 0x0031
    KeyO = 0x0018
    KeyP = 0x0019
    KeyQ = 0x0010
    KeyR = 0x0013
    KeyS = 0x001F
    KeyT = 0x0014
    KeyU = 0x0016
    KeyV = 0x002F
    KeyW = 0x0011
    KeyX = 0x002D
    KeyY = 0x0015
    KeyZ = 0x002C
    Key1 = 0x0002
    Key2 = 0x0003
    Key3 = 0x0004
    Key4 = 0x0005
    Key5 = 0x0006
    Key6 = 0x0007
    Key7 = 0x0008
    Key8 = 0x0009
    Key9 = 0x000A
    Key0 = 0x000B
    KeyEnter = 0x001C
    KeyEsc = 0x0001
    KeyDelete = 0x000E
    KeyTab = 0x000F
    KeySpace = 0x0039
    KeyMinus = 0x000C
    KeyEqual = 0x000D
    KeyLeftBrace = 0x001A
    KeyRightBrace = 0x001B
    KeyBackslash = 0x002B
    KeySemiColon = 0x0027
    KeyApostrophe = 0x0028
    KeyGrave = 0x0029
    KeyComma = 0x0033
    KeyDot = 0x0034
    KeySlash = 0x0035
    KeyCapsLock = 0x003A
    KeyF1 = 0x003B
    KeyF2 = 0x003C
    KeyF3 = 0x003D
    KeyF4 = 0x003E
    KeyF5 = 0x003F
    KeyF6 = 0x0040
    KeyF7 = 0x0041
    KeyF8 = 0x0042
    KeyF9 = 0x0043
    KeyF10 = 0x0044
    KeyF11 = 0x0057
    KeyF12 = 0x0058
    KeyPrintScreen = 0xE037
    KeyScrollLock = 0x0046
    KeyPause = 0xE11D45
    KeyInsert = 0xE052
    KeyHome = 0xE047
    KeyPageUp = 0xE049
    KeyDeleteForward = 0xE053
    KeyEnd = 0xE04F
    KeyPageDown = 0xE051
    KeyRight = 0xE04D
    KeyLeft = 0xE04B
    KeyDown = 0xE050
    KeyUp = 0xE048
    KeypadNumLock = 0x0045
    KeypadSlash = 0xE035
    KeypadStar = 0x0037
    KeypadDash = 0x004A
    KeypadPlus = 0x004E
    KeypadEnter = 0xE01C
    Keypad1End = 0x004F
    Keypad2DownArrow = 0x0050
    Keypad3PageDn = 0x0051
    Keypad4LeftArrow = 0x004B
    Keypad5 = 0x004C
    Keypad6RightArrow = 0x004D
    Keypad7Home = 0x0047
    Keypad8UpArrow = 0x0048
    Keypad9PageUp = 0x0049
    Keypad0Insert = 0x0052
    KeypadDot = 0x0053
    KeyNonUSSlashBar = 0x0056
    KeyApplication = 0xE05D
    KeypadEquals = 0x0059
    KeyF13 = 0x0064
    KeyF14 = 0x0065
    KeyF15 = 0x0066
    KeyF16 = 0x0067
    KeyF17 = 0x0068
    KeyF18 = 0x0069
    KeyF19 = 0x006A
    KeyF20 = 0x006B
    KeyF21 = 0x006C
    KeyF22 = 0x006D
    KeyF23 = 0x006E
    KeyF24 = 0x0076  # also LANG5
    KeypadComma = 0x007E
    KeyInternational1 = 0x0073
    KeyInternational2 = 0x0070
    KeyInternational3 = 0x007D
    KeyInternational4 = 0x0079
    KeyInternational5 = 0x007B
    KeyLANG1 = 0x0072
    KeyLANG2 = 0x0071
    KeyLANG3 = 0x0078
    KeyLANG4 = 0x0077
    KeyLeftCtrl = 0x001D
    KeyLeftShift = 0x002A
    KeyLeftAlt = 0x0038
    KeyLeftGUI = 0xE05B
    KeyRightCtrl = 0xE01D
    KeyRightShift = 0x0036
    KeyFakeRightShift = 0xE036
    KeyRightAlt = 0xE038
    KeyRightGUI = 0xE05C
    KeyScanNextTrack = 0xE019
    KeyScanPreviousTrack = 0xE010
    KeyStop = 0xE024
    KeyPlayPause = 0xE022
    KeyMute = 0xE020
    KeyVolumeUp = 0xE030
    KeyVolumeDown = 0xE02E
    ALConsumerControlConfiguration = 0xE06D
    ALEmailReader = 0xE06C
    ALCalculator = 0xE021
    ALLocalMachineBrowser = 0xE06B
    ACSearch = 0xE065
    ACHome = 0xE032
    ACBack = 0xE06A
    ACForward = 0xE069
    ACStop = 0xE068
    ACRefresh = 0xE067
    ACBookmarks = 0xE066


@unique
class Linux(IntEnum):
    """Linux evdev key codes (``KEY_*`` from the kernel input event codes)."""

    KeyReserved = 0
    KeyEsc = 1
    Key1 = 2
    Key2 = 3
    Key3 = 4
    Key4 = 5
    Key5 = 6
    Key6 = 7
    Key7 = 8
    Key8 = 9
    Key9 = 10
    Key0 = 11
    KeyMinus = 12
    KeyEqual = 13
    KeyBackspace = 14
    KeyTab = 15
    KeyQ = 16
    KeyW = 17
    KeyE = 18
    KeyR = 19
    KeyT = 20
    KeyY = 21
    KeyU = 22
    KeyI = 23
    KeyO = 24
    KeyP = 25
    KeyLeftbrace = 26
    KeyRightbrace = 27
    KeyEnter = 28
    KeyLeftCtrl = 29
    KeyA = 30
    KeyS = 31
    KeyD = 32
    KeyF = 33
    KeyG = 34
    KeyH = 35
    KeyJ = 36
    KeyK = 37
    KeyL = 38
    KeySemicolon = 39
    KeyApostrophe = 40
    KeyGrave = 41
    KeyLeftShift = 42
    KeyBackslash = 43
    KeyZ = 44
    KeyX = 45
    KeyC = 46
    KeyV = 47
    KeyB = 48
    KeyN = 49
    KeyM = 50
    KeyComma = 51
    KeyDot = 52
    KeySlash = 53
    KeyRightShift = 54
    KeyKpAsterisk = 55
    KeyLeftAlt = 56
    KeySpace = 57
    KeyCapsLock = 58
    KeyF1 = 59
    KeyF2 = 60
    KeyF3 = 61
    KeyF4 = 62
    KeyF5 = 63
    KeyF6 = 64
    KeyF7 = 65
    KeyF8 = 66
    KeyF9 = 67
    KeyF10 = 68
    KeyNumlock = 69
    KeyScrollLock = 70
    KeyKp7 = 71
    KeyKp8 = 72
    KeyKp9 = 73
    KeyKpMinus = 74
    KeyKp4 = 75
    KeyKp5 = 76
    KeyKp6 = 77
    KeyKpplus = 78
    KeyKp1 = 79
    KeyKp2 = 80
    KeyKp3 = 81
    KeyKp0 = 82
    KeyKpDot = 83
    Invalid = 84
    KeyZenkakuhankaku = 85
    Key102nd = 86
    KeyF11 = 87
    KeyF12 = 88
    KeyRo = 89
    KeyKatakana = 90
    KeyHiragana = 91
    KeyHenkan = 92
    KeyKatakanahiragana = 93
    KeyMuhenkan = 94
    KeyKpJpComma = 95
    KeyKpEnter = 96
    KeyRightCtrl = 97
    KeyKpslash = 98
    KeySysrq = 99
    KeyRightalt = 100
    KeyLinefeed = 101
    KeyHome = 102
    KeyUp = 103
    KeyPageup = 104
    KeyLeft = 105
    KeyRight = 106
    KeyEnd = 107
    KeyDown = 108
    KeyPagedown = 109
    KeyInsert = 110
    KeyDelete = 111
    KeyMacro = 112
    KeyMute = 113
    KeyVolumeDown = 114
    KeyVolumeUp = 115
    KeyPower = 116
    KeyKpequal = 117
    KeyKpplusminus = 118
    KeyPause = 119
    KeyScale = 120
    KeyKpcomma = 121
    KeyHanguel = 122
    KeyHanja = 123
    KeyYen = 124
    KeyLeftMeta = 125
    KeyRightmeta = 126
    KeyCompose = 127
    KeyStop = 128
    KeyAgain = 129
    KeyProps = 130
    KeyUndo = 131
    KeyFront = 132
    KeyCopy = 133
    KeyOpen = 134
    KeyPaste = 135
    KeyFind = 136
    KeyCut = 137
    KeyHelp = 138
    KeyMenu = 139
    KeyCalc = 140
    KeySetup = 141
    KeySleep = 142
    KeyWakeup = 143
    KeyFile = 144
    KeySendfile = 145
    KeyDeletefile = 146
    KeyXfer = 147
    KeyProg1 = 148
    KeyProg2 = 149
    KeyWww = 150
    KeyMsdos = 151
    KeyCoffee = 152
    KeyRotateDisplay = 153
    KeyCyclewindows = 154
    KeyMail = 155
    KeyBookmarks = 156
    KeyComputer = 157
    KeyBack = 158
    KeyForward = 159
    KeyClosecd = 160
    KeyEjectcd = 161
    KeyEjectclosecd = 162
    KeyNextsong = 163
    KeyPlaypause = 164
    KeyPrevioussong = 165
    KeyStopcd = 166
    KeyRecord = 167
    KeyRewind = 168
    KeyPhone = 169
    KeyIso = 170
    KeyConfig = 171
    KeyHomepage = 172
    KeyRefresh = 173
    KeyExit = 174
    KeyMove = 175
    KeyEdit = 176
    KeyScrollup = 177
    KeyScrolldown = 178
    KeyKpleftparen = 179
    KeyKprightparen = 180
    KeyNew = 181
    KeyRedo = 182
    KeyF13 = 183
    KeyF14 = 184
    KeyF15 = 185
    KeyF16 = 186
    KeyF17 = 187
    KeyF18 = 188
    KeyF19 = 189
    KeyF20 = 190
    KeyF21 = 191
    KeyF22 = 192
    KeyF23 = 193
    KeyF24 = 194
    Invalid1 = 195
    Invalid2 = 196
    Invalid3 = 197
    Invalid4 = 198
    Invalid5 = 199
    KeyPlaycd = 200
    KeyPausecd = 201
    KeyProg3 = 202
    KeyProg4 = 203
    KeyAllApplications = 204
    KeySuspend = 205
    KeyClose = 206
    KeyPlay = 207
    KeyFastforward = 208
    KeyBassboost = 209
    KeyPrint = 210
    KeyHp = 211
    KeyCamera = 212
    KeySound = 213
    KeyQuestion = 214
    KeyEmail = 215
    KeyChat = 216
    KeySearch = 217
    KeyConnect = 218
    KeyFinance = 219
    KeySport = 220
    KeyShop = 221
    KeyAlterase = 222
    KeyCancel = 223
    KeyBrightnessdown = 224
    KeyBrightnessup = 225
    KeyMedia = 226
    KeySwitchvideomode = 227
    KeyKbdillumtoggle = 228
    KeyKbdillumdown = 229
    KeyKbdillumup = 230
    KeySend = 231
    KeyReply = 232
    KeyForwardmail = 233
    KeySave = 234
    KeyDocuments = 235
    KeyBattery = 236
    KeyBluetooth = 237
    KeyWlan = 238
    KeyUwb = 239
    KeyUnknown = 240
    KeyVideoNext = 241
    KeyVideoPrev = 242
    KeyBrightnessCycle = 243
    KeyBrightnessAuto = 244
    KeyDisplayOff = 245
    KeyWwan = 246
    KeyRfkill = 247
    KeyMicmute = 248
    KeyCount = 249