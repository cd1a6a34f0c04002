ERRORS = {
  "E_HEX_DECODE": "Record is not valid hexadecimal",
  "E_SHORT_BUFFER": "Decoded buffer shorter than discriminator",
  "W_SHORT_PAYLOAD": "Decoded buffer shorter than fixed header",
  "E_INPUT_FILE": "Record file could not be read",
}
