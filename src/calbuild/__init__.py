"""
calbuild: calendrical value resolution.

Turns loose bags of field observations (year, month_of_year, epoch_day, hour_of_day,
quarter_of_year, ...) into concrete dates, times, and date-times under a pluggable
chronology.

- calbuild.core: zero-IO field model, field store, value types, chronologies, resolvers.
- calbuild.io: environment/TOML configuration and polars batch resolution.
"""
