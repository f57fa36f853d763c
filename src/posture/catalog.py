"""Static catalog of component types that can be placed in a diagram."""

from __future__ import annotations

from posture.models import ComponentType, Tier


class UnknownComponentError(KeyError):
    """Raised when a component type id is not in the catalog."""


def _c(id: str, name: str, short_name: str, category: str, section: str,
       tier: Tier, description: str, *benefits: str) -> ComponentType:
    return ComponentType(id=id, name=name, short_name=short_name, category=category,
                         section=section, tier=tier, description=description,
                         benefits=tuple(benefits))


_INFRA = Tier.INFRASTRUCTURE
_APP = Tier.APPLICATION
_CONTROLS = Tier.SECURITY_CONTROLS
_HUMAN = Tier.HUMAN_GOVERNANCE

COMPONENTS: tuple[ComponentType, ...] = (
    # --- Infrastructure ---
    _c("firewall", "Next-Gen Firewall", "NGFW", "Network Security", "Network Infrastructure", _INFRA,
       "Advanced firewall with deep packet inspection and threat prevention",
       "Application-aware security", "Intrusion prevention", "SSL/TLS inspection"),
    _c("router", "Enterprise Router", "Router", "Network Infrastructure", "Network Infrastructure", _INFRA,
       "Core routing infrastructure with security features",
       "Secure routing protocols", "Traffic segmentation", "QoS enforcement"),
    _c("switch", "Layer 3 Switch", "L3 Switch", "Network Infrastructure", "Network Infrastructure", _INFRA,
       "Advanced switching with routing capabilities",
       "VLAN segmentation", "Access control lists", "Port security"),
    _c("wap", "Wireless Access Point", "WAP", "Network Infrastructure", "Network Infrastructure", _INFRA,
       "Enterprise wireless access point with security features",
       "WPA3 encryption", "Client isolation", "Rogue AP detection"),
    _c("loadbalancer", "Load Balancer", "LB", "Network Infrastructure", "Network Infrastructure", _INFRA,
       "Distributes network traffic across multiple servers",
       "Traffic distribution", "High availability", "SSL offloading"),
    _c("vpn", "VPN Gateway", "VPN", "Network Infrastructure", "Network Infrastructure", _INFRA,
       "Secure remote access to corporate resources",
       "Encrypted tunneling", "Remote access", "Site-to-site connectivity"),
    _c("server", "Enterprise Server", "Server", "Infrastructure", "Server Infrastructure", _INFRA,
       "Secure server infrastructure",
       "Hardened configuration", "Resource isolation", "Security baseline"),
    _c("storage", "Secure Storage", "Storage", "Infrastructure", "Server Infrastructure", _INFRA,
       "Enterprise storage with security controls",
       "Data encryption", "Access auditing", "Secure backup"),
    _c("endpoint", "Endpoint Device", "Endpoint", "Endpoint", "Endpoint Infrastructure", _INFRA,
       "End-user computing devices with security controls",
       "Device encryption", "Secure boot", "Anti-malware"),
    _c("mobiledm", "Mobile Device Management", "MDM", "Endpoint", "Endpoint Infrastructure", _INFRA,
       "Management platform for mobile devices",
       "Device enrollment", "Policy enforcement", "Remote wipe"),
    # --- Application & software ---
    _c("webapp", "Web Application", "Web App", "Application", "Applications", _APP,
       "Customer-facing or internal web application",
       "Input validation", "Authentication", "Session management"),
    _c("api", "API Gateway", "API", "Application", "Applications", _APP,
       "Managed API gateway for service integration",
       "Rate limiting", "Authentication", "Request validation"),
    _c("microservices", "Microservices", "Micro", "Application", "Applications", _APP,
       "Distributed service architecture",
       "Service isolation", "Scalability", "Independent deployment"),
    _c("serverless", "Serverless Functions", "FaaS", "Application", "Applications", _APP,
       "Event-driven compute service",
       "Auto-scaling", "Event-driven", "Reduced attack surface"),
    _c("database", "Database", "DB", "Data Storage", "Applications", _APP,
       "Secure database for application data",
       "Encryption at rest", "Access controls", "Audit logging"),
    _c("datawarehouse", "Data Warehouse", "DW", "Data Storage", "Applications", _APP,
       "Enterprise data warehouse for analytics",
       "Data governance", "Access controls", "Encryption"),
    _c("cicd", "CI/CD Pipeline", "CI/CD", "DevOps", "Development", _APP,
       "Continuous integration and deployment pipeline",
       "Secure builds", "Dependency scanning", "Image signing"),
    _c("sast", "Static Application Security Testing", "SAST", "DevSecOps", "Development", _APP,
       "Static code analysis for security vulnerabilities",
       "Code scanning", "Vulnerability detection", "Early remediation"),
    _c("dast", "Dynamic Application Security Testing", "DAST", "DevSecOps", "Development", _APP,
       "Dynamic testing of running applications",
       "Runtime analysis", "Attack simulation", "Vulnerability detection"),
    _c("containers", "Container Platform", "Containers", "Infrastructure", "Development", _APP,
       "Container orchestration platform",
       "Isolation", "Immutable infrastructure", "Security scanning"),
    # --- Security controls ---
    _c("ids", "Intrusion Detection System", "IDS", "Security Monitoring", "Security Controls", _CONTROLS,
       "Monitors network traffic for suspicious activity",
       "Real-time threat detection", "Network behavior analysis", "Compliance monitoring"),
    _c("ips", "Intrusion Prevention System", "IPS", "Security Monitoring", "Security Controls", _CONTROLS,
       "Actively blocks detected threats",
       "Automated threat blocking", "Real-time protection", "Policy enforcement"),
    _c("waf", "Web Application Firewall", "WAF", "Application Security", "Security Controls", _CONTROLS,
       "Protects web applications from attacks",
       "OWASP top 10 protection", "Bot protection", "API security"),
    _c("apifirewall", "API Security Gateway", "API Sec", "Application Security", "Security Controls", _CONTROLS,
       "Protects APIs from security threats",
       "Schema validation", "Rate limiting", "Token validation"),
    _c("dlp", "Data Loss Prevention", "DLP", "Data Security", "Security Controls", _CONTROLS,
       "Prevents unauthorized data exfiltration",
       "Content inspection", "Policy enforcement", "Data classification"),
    _c("encryption", "Encryption Service", "Encrypt", "Data Security", "Security Controls", _CONTROLS,
       "Enterprise encryption platform",
       "Data protection", "Key management", "Compliance enablement"),
    _c("casb", "Cloud Access Security Broker", "CASB", "Cloud Security", "Security Controls", _CONTROLS,
       "Secures cloud service usage",
       "Visibility", "Compliance", "Threat protection"),
    _c("iam", "Identity & Access Management", "IAM", "Access Control", "Identity & Access", _CONTROLS,
       "Centralized identity management platform",
       "Single sign-on", "Role-based access", "User lifecycle management"),
    _c("pam", "Privileged Access Management", "PAM", "Access Control", "Identity & Access", _CONTROLS,
       "Manages privileged account access",
       "Password vaulting", "Session recording", "Just-in-time access"),
    _c("mfa", "Multi-Factor Authentication", "MFA", "Authentication", "Identity & Access", _CONTROLS,
       "Additional authentication factors",
       "Biometric authentication", "Hardware tokens", "Push notifications"),
    _c("passwordmgr", "Password Manager", "PassMgr", "Authentication", "Identity & Access", _CONTROLS,
       "Secure password storage and management",
       "Strong password generation", "Secure storage", "Password sharing"),
    _c("siem", "Security Information & Event Management", "SIEM", "Security Monitoring",
       "Monitoring & Response", _CONTROLS,
       "Centralized security monitoring platform",
       "Log aggregation", "Correlation analysis", "Threat hunting"),
    _c("soar", "Security Orchestration & Response", "SOAR", "Incident Response", "Monitoring & Response", _CONTROLS,
       "Automated security response platform",
       "Incident playbooks", "Automated response", "Case management"),
    _c("edr", "Endpoint Detection & Response", "EDR", "Endpoint Security", "Monitoring & Response", _CONTROLS,
       "Advanced endpoint protection platform",
       "Behavior monitoring", "Threat hunting", "Incident response"),
    _c("threatintel", "Threat Intelligence Platform", "TIP", "Security Intelligence",
       "Monitoring & Response", _CONTROLS,
       "Collects and analyzes threat intelligence",
       "Indicator management", "Threat correlation", "Intelligence sharing"),
    _c("email-security", "Email Security Gateway", "Email Sec", "Communication Security",
       "Security Controls", _CONTROLS,
       "Protects against email-based threats",
       "Phishing protection", "Malware scanning", "Data loss prevention"),
    # --- Human & governance ---
    _c("awareness", "Security Awareness Training", "Training", "User Awareness", "Human & Governance", _HUMAN,
       "Security awareness and training program",
       "Phishing awareness", "Password hygiene", "Social engineering defense"),
    _c("policy", "Security Policies", "Policies", "Governance", "Human & Governance", _HUMAN,
       "Security policies and procedures",
       "Clear guidelines", "Compliance alignment", "Risk management"),
    _c("accessreview", "Access Reviews", "Reviews", "Governance", "Human & Governance", _HUMAN,
       "Regular access control reviews",
       "Least privilege", "Separation of duties", "Regulatory compliance"),
    _c("audit", "Security Audits", "Audits", "Governance", "Human & Governance", _HUMAN,
       "Regular security audits and assessments",
       "Gap identification", "Control validation", "Continuous improvement"),
    _c("grc", "GRC Platform", "GRC", "Governance", "Human & Governance", _HUMAN,
       "Governance, Risk, and Compliance management",
       "Policy management", "Risk assessment", "Compliance tracking"),
    _c("bcdr", "Business Continuity & Disaster Recovery", "BCDR", "Resilience", "Human & Governance", _HUMAN,
       "Ensures business operations can continue during disruptions",
       "Business impact analysis", "Recovery planning", "Regular testing"),
    _c("vendor", "Third-Party Risk Management", "TPRM", "Supply Chain", "Human & Governance", _HUMAN,
       "Manages risks from third-party vendors",
       "Vendor assessment", "Continuous monitoring", "Risk-based approach"),
    _c("incident", "Incident Response Program", "IR", "Response", "Human & Governance", _HUMAN,
       "Structured approach to handle security incidents",
       "Defined playbooks", "Regular training", "Post-incident analysis"),
)

_BY_ID: dict[str, ComponentType] = {c.id: c for c in COMPONENTS}


def get_component(type_id: str) -> ComponentType:
    try:
        return _BY_ID[type_id]
    except KeyError:
        raise UnknownComponentError(type_id) from None


def find_component(type_id: str) -> ComponentType | None:
    return _BY_ID.get(type_id)


def list_components(tier: Tier | str | None = None) -> list[ComponentType]:
    """Catalog entries in declaration order, optionally filtered to one tier."""
    if tier is None:
        return list(COMPONENTS)
    t = Tier(tier)
    return [c for c in COMPONENTS if c.tier == t]


def tiers() -> list[Tier]:
    """Tiers in the order they first appear in the catalog."""
    seen: list[Tier] = []
    for c in COMPONENTS:
        if c.tier not in seen:
            seen.append(c.tier)
    return seen


def components_by_section(tier: Tier | str | None = None) -> dict[str, list[ComponentType]]:
    sections: dict[str, list[ComponentType]] = {}
    for c in list_components(tier):
        sections.setdefault(c.section, []).append(c)
    return sections
