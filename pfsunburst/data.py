"""
The public finance challenges taxonomy rendered by the dashboard.

Root -> challenge group -> bottleneck -> policy statements.
"""

ROOT_LABEL = "Role of Public Finance"

PUBLIC_FINANCE_CHALLENGES = {
    ROOT_LABEL: {
        "Commitment to Feasible Policy": {
            "Insufficient Stakeholder Commitment to Policy Action": [
                "Inadequate commitment of political and technical leadership to policy action and associated resource mobilization and use within or across sectors",
                "Inadequately broad-based stakeholder involvement, understanding and support for policy action and associated resource mobilization and use",
            ],
            "Incoherence and fragmentation of policy": [
                "Fragmented, inconsistent and uncoordinated policies across or within sectors",
            ],
            "Mismatch between policy goals, capability and resources": [
                "Domestic revenue policies generate insufficient resources to achieve policy goals given fiscal reality",
                "Public policy goals are unaffordable given costs and fiscal reality",
                "Policies do not take into account the available organizational capability to achieve goals",
            ],
        },
        "Fiscal sustainability": {
            "Unsustainable fiscal situation of governments and organizations": [
                "Short term biases lead to pro-cyclical spending and force deep cuts during downturns",
                "Biased or inaccurate fiscal forecasting and unpredictable, volatile resource flows result in budgets being under-funded",
                "Un-strategic, ad hoc and supply driven debt management undermines fiscal consolidation and reduces fiscal space",
                "Pre-existing spending commitments and debt burdens create budget rigidity and limit options for fiscal consolidation and/or increasing fiscal space",
                "Financial unviability of providers and utilities",
            ],
        },
        "Effective Resource Mobilization & Distribution": {
            "Inadequate and inequitable resources mobilized and deployed for policy implementation": [
                "Limited or costly financing mobilized for public Investment and service delivery",
                "Resource deployment is often incremental and disconnected from public policy priorities",
                "Resource deployment is not informed by demand or costs of achieving public policy objectives",
                "Unequal and inequitable resource mobilization and distribution, misaligned with policy and effective delivery",
            ],
            "Unreliable, delayed and fragmented funding for delivery": [
                "Ad hoc, political and fragmented funding channels contributes to ineffective and inefficient delivery",
                "Shortfalls, delays and diversion of funding for delivery",
            ],
            "Inefficient deployment and management of resources and inputs for delivery": [
                "Inefficient public investment decisions and management of assets",
                "Inefficient deployment and poor motivation and inadequate skills of frontline and other staff",
                "Limited availability of operational resources relative to salaries and delivery infrastructure",
                "Delays in and inflated cost of procurement for infrastructure and operational inputs",
                "Weak management of resources at national and subnational levels up to the point of delivery",
            ],
        },
        "Performance & Accountability in Delivery": {
            "Incentives, management oversight, and accountability systems and institutions fail to enable and encourage performance as intended": [
                "The design of regulatory, incentive, control and management systems limits autonomy and discourages performance",
                "Non-compliance and weak enforcement of regulatory, PFM and public sector management systems undermines performance and accountability",
                "Weaknesses in fiscal governance undermine public and private investment and action",
                "Inadequate oversight, monitoring, evaluation and accountability for resources and performance",
            ],
            "Inadequate use of fragmented sector and financial data in decision making for policy and delivery.": [
                "Available financial and non-financial information not used for decision making, management and accountability",
                "Data systems are fragmented and do not interoperate",
            ],
        },
    }
}

# Sub-palettes keyed by challenge group, indexed by depth.
GROUP_PALETTES = {
    "Commitment to Feasible Policy": {1: "#F84B64", 2: "#C9E7F8", 3: "#D2B4DE"},
    "Fiscal sustainability": {1: "#F84B64", 2: "#C9E7F8", 3: "#F1948A"},
    "Effective Resource Mobilization & Distribution": {
        1: "#FF848B",
        2: "#C9E7F8",
        3: "#A9DFBF",
    },
    "Performance & Accountability in Delivery": {
        1: "#FF848B",
        2: "#C9E7F8",
        3: "#85C1E9",
    },
}

# Fill colors that carry white text; everything else is drawn in black.
STRONG_FILLS = {"#F84B64": "#FFFFFF", "#FF848B": "#FFFFFF"}
