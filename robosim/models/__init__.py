"""Model interfaces and constant-acceleration, bicycle and planar arm models."""