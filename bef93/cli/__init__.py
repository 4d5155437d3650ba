""" Command line interface of bef93. """
