"""Exercise and quiz domain engine for the courseware platform."""
