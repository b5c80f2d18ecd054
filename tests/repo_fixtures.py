"""Helpers that lay out small repositories on disk for the tests."""
import os

CSHARP_GUID = "{FAE04EC0-301F-11D3-BF4B-00C04F79EFBC}"
WAP_GUID = "{349C5851-65DF-11DA-9384-00065B846F21}"
WEBSITE_GUID = "{E24C65DC-7377-472B-9ABA-BC803B73C61A}"
SOLUTION_FOLDER_GUID = "{2150E333-8FDC-42A3-9474-1A3956D46DE8}"

WAP_PROJECT = """<?xml version="1.0" encoding="utf-8"?>
<Project ToolsVersion="4.0" DefaultTargets="Build" xmlns="http://schemas.microsoft.com/developer/msbuild/2003">
  <PropertyGroup>
    <ProjectTypeGuids>{wap};{csharp}</ProjectTypeGuids>
    <OutputType>Library</OutputType>
  </PropertyGroup>
</Project>
""".format(wap=WAP_GUID, csharp=CSHARP_GUID)

LIBRARY_PROJECT = """<?xml version="1.0" encoding="utf-8"?>
<Project ToolsVersion="4.0" DefaultTargets="Build" xmlns="http://schemas.microsoft.com/developer/msbuild/2003">
  <PropertyGroup>
    <OutputType>Library</OutputType>
  </PropertyGroup>
</Project>
"""

SDK_WEB_PROJECT = """<Project Sdk="Microsoft.NET.Sdk.Web">
  <PropertyGroup>
    <TargetFramework>net8.0</TargetFramework>
  </PropertyGroup>
</Project>
"""


def write_file(root, relative_path, content=""):
    path = os.path.join(root, *relative_path.split("/"))
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(content)
    return path


def web_project(root, relative_path):
    return write_file(root, relative_path, WAP_PROJECT)


def sdk_web_project(root, relative_path):
    return write_file(root, relative_path, SDK_WEB_PROJECT)


def library_project(root, relative_path):
    return write_file(root, relative_path, LIBRARY_PROJECT)


def solution(root, relative_path, entries):
    """
    Write a solution file.

    entries: (type_guid, name, path relative to the solution, backslash separated)
    """
    lines = [
        "",
        "Microsoft Visual Studio Solution File, Format Version 12.00",
        "# Visual Studio 2012",
    ]
    for index, (type_guid, name, member_path) in enumerate(entries):
        lines.append(f'Project("{type_guid}") = "{name}", "{member_path}", "{{00000000-0000-0000-0000-{index:012d}}}"')
        lines.append("EndProject")
    lines.extend(["Global", "EndGlobal", ""])
    return write_file(root, relative_path, "\n".join(lines))
