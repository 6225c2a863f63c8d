""" Hosts that can populate a namespace tree. """
