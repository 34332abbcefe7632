# =========================
# HAND LANDMARKS (MediaPipe Hands topology)
# =========================
NUM_LANDMARKS = 21

WRIST      = 0
THUMB_TIP  = 4
INDEX_MCP  = 5
INDEX_TIP  = 8
MIDDLE_MCP = 9
MIDDLE_PIP = 10
MIDDLE_TIP = 12
RING_MCP   = 13
RING_PIP   = 14
RING_TIP   = 16
PINKY_MCP  = 17
PINKY_PIP  = 18
PINKY_TIP  = 20

# wrist + the four MCP knuckles: stable under finger movement
PALM_INDICES = (WRIST, INDEX_MCP, MIDDLE_MCP, RING_MCP, PINKY_MCP)

# (tip, pip) pairs checked by the strict pinch gate
CURL_FINGERS = {
    "MIDDLE": (MIDDLE_TIP, MIDDLE_PIP),
    "RING":   (RING_TIP, RING_PIP),
    "PINKY":  (PINKY_TIP, PINKY_PIP),
}
