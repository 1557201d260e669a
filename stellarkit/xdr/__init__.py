"""XDR streams, primitive codecs and length-limited compound types."""