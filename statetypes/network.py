"""Network versions at which actor behaviour may change."""

import enum


class NetworkVersion(enum.IntEnum):
    """Enumeration of network upgrades."""

    VERSION0 = 0  # genesis
    VERSION1 = 1  # breeze
    VERSION2 = 2  # smoke
    VERSION3 = 3  # ignition
    VERSION4 = 4  # actors v2
    VERSION5 = 5  # tape
    VERSION6 = 6  # kumquat
    VERSION7 = 7  # calico
    VERSION8 = 8  # persian
    VERSION9 = 9  # orange
    VERSION10 = 10  # trust
    VERSION11 = 11  # norwegian
    VERSION12 = 12  # turbo
    VERSION13 = 13  # hyperdrive
    VERSION14 = 14  # chocolate
    VERSION15 = 15
    VERSION16 = 16
    VERSION17 = 17
    VERSION_MAX = 2**32 - 1