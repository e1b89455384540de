# Should be all-lower
ENTRYPOINT_NAME = "flatblog"
