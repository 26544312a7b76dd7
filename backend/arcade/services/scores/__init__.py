"""Score submission services: bounds, validation, rate limiting, persistence.

These modules hold the domain rules for accepting a client-reported score.
HTTP routes import them and only translate results into responses, keeping
transport concerns out of the validation pipeline.
"""
