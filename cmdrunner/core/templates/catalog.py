"""Built-in template definitions.

Each entry is a template line in ``"description :: command"`` form. The
general catalog is the cross-platform list plus the extras for the running
system; the aws catalog holds AWS IAM and SSO enumeration commands.
"""

from typing import Literal

from cmdrunner.core.templates.models import Template
from cmdrunner.core.templates.parser import parse_template_line
from cmdrunner.utils.platform import OSType, open_command

Catalog = Literal["general", "aws"]

COMMON_TEMPLATES = (
    "List all files with details :: ls -la",
    "List all files in specified directory :: ls -la {DIRECTORY}",
    "List all files with hidden files option :: ls --all {DIRECTORY}",
    "Find files with specific extension :: find . -name \"*.{EXTENSION}\"",
    "Find files with specific pattern and type :: find . -name \"{PATTERN}\" -type {TYPE:f}",
    "Search for text pattern recursively :: grep -r \"{PATTERN}\" {DIRECTORY:-.}",
    "Search with regular expression :: grep --regexp {PATTERN} {FILE}",
    "Show disk usage :: df -h",
    "Find specific process :: ps aux | grep {PROCESS_NAME}",
    "Monitor system processes :: top",
    "Show size of files and directories :: du -sh *",
    "Show size of files in specified directory :: du -sh {DIRECTORY}/*",
    "Show size with depth limit :: du --max-depth {DEPTH:3} {DIRECTORY}",
    "Download file from URL to specific location :: curl -o {OUTPUT_FILE} {URL}",
    "Download file with options :: curl -o {OUTPUT_FILE} {URL} --retry {RETRIES:3}",
    "Get content from URL :: curl {URL}",
    "Extract tar.gz archive :: tar -xvzf {ARCHIVE_FILE}",
    "Create directory with parents :: mkdir -p {DIRECTORY}",
    "Copy directory recursively :: cp -r {SOURCE} {DESTINATION}",
    "Copy file with options :: cp {SOURCE} {DESTINATION} --preserve {ATTRIBUTES:all}",
    "Copy file to remote host :: scp {LOCAL_FILE} {USER}@{HOST}:{REMOTE_PATH}",
    "Copy file to remote with options :: scp --port {PORT:22} {LOCAL_FILE} {USER}@{HOST}:{REMOTE_PATH}",
    "Connect to remote host :: ssh {USER}@{HOST}",
    "Connect to remote with X11 forwarding :: ssh {USER}@{HOST} --port {PORT:22}",
    "Clone git repository :: git clone {REPOSITORY_URL} {DIRECTORY:-.}",
    "Clone git repo with options :: git clone {REPOSITORY_URL} --branch {BRANCH:main} {DIRECTORY:-.}",
    "Create and switch to new branch :: git checkout -b {BRANCH_NAME}",
    "Git checkout with options :: git checkout {BRANCH} --force",
    "Git pull with options :: git pull --rebase {REMOTE:origin} {BRANCH:main}",
    "Git push with options :: git push --force {REMOTE:origin} {BRANCH}",
)

MACOS_TEMPLATES = (
    "Install package with Homebrew :: brew install {PACKAGE_NAME}",
    "Update and upgrade Homebrew packages :: brew update && brew upgrade",
    "Open file with specific application :: open -a {APPLICATION} {FILE}",
    "List disk partitions :: diskutil list",
    "List all network services :: networksetup -listallnetworkservices",
    "Prevent Mac from sleeping for time period :: caffeinate -t {SECONDS}",
    "Take screenshot after delay :: screencapture -T {SECONDS} {FILE_PATH}",
)

LINUX_TEMPLATES = (
    "Update package lists :: sudo apt update",
    "Install package with apt :: sudo apt install {PACKAGE_NAME}",
    "Upgrade all packages :: sudo apt upgrade",
    "System information :: lsb_release -a",
    "Install package with dnf :: sudo dnf install {PACKAGE_NAME}",
    "Show systemd service status :: systemctl status {SERVICE_NAME}",
    "Install package with pacman :: sudo pacman -S {PACKAGE_NAME}",
    "Take screenshot :: import -window root {FILE_PATH}",
    "List block devices :: lsblk",
    "Mount a device :: sudo mount /dev/{DEVICE} {MOUNT_POINT}",
    "Network interfaces :: ip addr",
)

AWS_TEMPLATES = (
    "IAM configure cli user credentials :: aws configure",
    "IAM get users, groups, roles, and policies :: aws iam get-account-authorization-details --profile {PROFILE:default}",
    "IAM get current user info :: aws iam get-user --profile {PROFILE:default}",
    "IAM list users :: aws iam list-users",
    "IAM list ssh public keys :: aws iam list-ssh-public-keys --profile {PROFILE:default}",
    "IAM get ssh public key :: aws iam get-ssh-public-key --user-name {USERNAME} --ssh-public-key-id {PUBLIC_KEY_ID} --encoding SSH",
    "IAM get special permissions of user over specific services :: aws iam list-service-specific-credentials --user-name  {USERNAME} --profile {PROFILE:default}",
    "IAM get metadata of user, including permissions boundaries :: aws iam get-user --user-name {USERNAME} --profile {PROFILE:default}",
    "IAM list created access keys :: aws iam list-access-keys --profile {PROFILE:default}",
    "IAM get inline policies of the user :: aws iam list-user-policies --user-name {USERNAME} --profile {PROFILE:default}",
    "IAM get inline policy details :: aws iam get-user-policy --user-name {USERNAME} --policy-name {POLICY_NAME} --profile {PROFILE:default}",
    "IAM get policies of user (it doesn't get inline policies) :: aws iam list-attached-user-policies --user-name {USERNAME} --profile {PROFILE:default}",
    "IAM get groups :: aws iam list-groups --profile {PROFILE:default}",
    "IAM get groups of a user :: aws iam list-groups-for-user --user-name {USERNAME} --profile {PROFILE:default}",
    "IAM get inline policies :: aws iam list-group-policies --group-name {GROUP_NAME} --profile {PROFILE:default}",
    "IAM get inline policy details :: aws iam get-group-policy --group-name {GROUP_NAME} --policy-name {POLICY_NAME} --profile {PROFILE:default}",
    "IAM get attached policies :: aws iam list-attached-group-policies --group-name {GROUP_NAME} --profile {PROFILE:default}",
    "IAM list roles :: aws iam list-roles",
    "IAM get role info :: aws iam get-role --role-name {ROLE_NAME} --profile {PROFILE:default}",
    "IAM list inline policies :: aws iam list-role-policies --role-name {ROLE_NAME} --profile {PROFILE:default}",
    "IAM get inline policy details :: aws iam get-role-policy --role-name {ROLE_NAME} --policy-name {POLICY_NAME} --profile {PROFILE:default}",
    "IAM get attached policies :: aws iam list-attached-role-policies --role-name {ROLE_NAME} --profile {PROFILE:default}",
    "IAM get role instances :: aws iam list-instance-profiles-for-role --role-name {ROLE_NAME} --profile {PROFILE:default}",
    "IAM list policies :: aws iam list-policies [--only-attached] [--scope Local] --profile {PROFILE:default}",
    "IAM get list of policies that give access to the user to the service :: aws iam list-policies-granting-service-access --arn {IDENTITY} --service-namespaces {SERVICE} --profile {PROFILE:default}",
    "IAM get basic policy info :: aws iam get-policy --policy-arn {POLICY_ARN} --profile {PROFILE:default}",
    "IAM list policy versions :: aws iam list-policy-versions --policy-arn {ARN} --profile {PROFILE:default}",
    "IAM get policy version :: aws iam get-policy-version --policy-arn {POLICY_ARN} --version-id {VERSION} --profile {PROFILE:default}",
    "IAM list SAML providers :: aws iam list-saml-providers --profile {PROFILE:default}",
    "IAM get SAML provider :: aws iam get-saml-provider --saml-provider-arn {ARN} --profile {PROFILE:default}",
    "IAM list openid providers :: aws iam list-open-id-connect-providers --profile {PROFILE:default}",
    "IAM get openid provider :: aws iam get-open-id-connect-provider --open-id-connect-provider-arn {ARN} --profile {PROFILE:default}",
    "IAM get my identity :: aws sts get-caller-identity --profile {PROFILE:default}",
    "IAM get user metadata :: aws iam get-user --user-name {USERNAME} --profile {PROFILE:default}",
    "IAM get info about an access key :: aws iam get-access-key-info --access-key-id {ACCESS_KEY_ID} --profile {PROFILE:default}",
    "IAM get last time an access key was used :: aws iam get-access-key-last-used --access-key-id {ACCESS_KEY_ID} --profile {PROFILE:default}",
    "SSO check if IAM Identity Center is used :: aws sso-admin list-instances --profile {PROFILE:default}",
    "SSO get permissions sets :: aws sso-admin list-permission-sets --instance-arn {INSTANCE_ARN} --profile {PROFILE:default}",
    "SSO for each permission set, check the permission set info (managed policies + content) :: aws sso-admin describe-permission-set --instance-arn {INSTANCE_ARN} --permission-set-arn {PERMISSION_SET_ARN} --profile {PROFILE:default}",
    "SSO for each permission set, check the managed policies :: aws sso-admin list-managed-policies-in-permission-set --instance-arn {INSTANCE_ARN} --permission-set-arn {PERMISSION_SET_ARN} --profile {PROFILE:default}",
    "SSO for each permission set, get the inline policy :: aws sso-admin get-inline-policy-for-permission-set --instance-arn {INSTANCE_ARN} --permission-set-arn {PERMISSION_SET_ARN} --profile {PROFILE:default}",
    "SSO get accounts where the identities with that permission set are going to have it :: aws sso-admin list-accounts-for-provisioned-permission-set --instance-arn {INSTANCE_ARN} --permission-set-arn {PERMISSION_SET_ARN} --profile {PROFILE:default}",
    "SSO get users with permission sets :: aws identitystore list-users --identity-store-id {IDENTITY_STORE_ID} --profile {PROFILE:default}",
    "SSO for each user, get the groups :: aws identitystore list-group-memberships-for-member --identity-store-id {IDENTITY_STORE_ID} --member-id UserId={USER_ID} --profile {PROFILE:default}",
    "SSO for each user, check if has Permission Sets directly :: aws sso-admin list-permission-sets-provisioned-to-principal --instance-arn {INSTANCE_ARN} --principal-id {USER_ID} --principal-type USER --profile {PROFILE:default}",
    "SSO for each group, check if has Permission Sets :: aws sso-admin list-permission-sets-provisioned-to-principal --instance-arn {INSTANCE_ARN} --principal-id {GROUP_ID} --principal-type GROUP --profile {PROFILE:default}",
    "SSO for each user/group with a Permission Set, check in which accounts it'll be used :: aws sso-admin list-account-assignments --instance-arn {INSTANCE_ARN} --account-id {ACCOUNT_ID} --permission-set-arn {PERMISSION_SET_ARN} --profile {PROFILE:default}",
)


def _open_file_template(os_type: OSType) -> str:
    return f"Open file with default application :: {open_command(os_type)} {{FILE}}"


def builtin_lines(catalog: Catalog, os_type: OSType) -> list[str]:
    """Return the built-in template lines for a catalog and system.

    Args:
        catalog: "general" or "aws".
        os_type: Running operating system.

    Returns:
        Template lines in definition order.
    """
    if catalog == "aws":
        return list(AWS_TEMPLATES)

    lines = [*COMMON_TEMPLATES, _open_file_template(os_type)]
    if os_type is OSType.MACOS:
        lines.extend(MACOS_TEMPLATES)
    elif os_type is OSType.LINUX:
        lines.extend(LINUX_TEMPLATES)
    return lines


def builtin_templates(catalog: Catalog, os_type: OSType) -> list[Template]:
    """Parse the built-in template lines for a catalog and system."""
    templates = []
    for line in builtin_lines(catalog, os_type):
        template = parse_template_line(line)
        if template is not None:
            templates.append(template)
    return templates
