from enum import Enum


class PaymentPreference(str, Enum):
    lowes_pro_rewards = "lowes-pro-rewards"
    lowes_commercial_account = "lowes-commercial-account"
    other_business_credit = "other-business-credit"
    non_business_credit = "non-business-credit"
    cash = "cash"


class DefaultTrade(str, Enum):
    general_contractor = "general-contractor"
    remodeler = "remodeler"
    electrician = "electrician"
    plumber = "plumber"
    hvac = "hvac"
    roofer = "roofer"
    painter = "painter"
    flooring = "flooring"
    landscaper = "landscaper"
    concrete = "concrete"
