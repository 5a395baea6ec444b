# Copyright (c) Microsoft. All rights reserved.

VERSION = "0.1.0b1"
